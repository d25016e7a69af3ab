"""
decision_brief.reporting - Terminal display and flat-file export.

Consumes parsed ``Recommendation`` lists and saved sessions; produces text for
the CLI or files for spreadsheets. It never parses report text itself.

Modules:
  formatters - ASCII cards and tables for Typer CLI commands.
  export     - CSV/JSON export helpers.
"""
