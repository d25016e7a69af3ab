"""
decision_brief.analytics - Roll-ups over saved analysis sessions.

Modules:
  aggregator - compute_analytics(): totals, priority mix, monthly activity.
"""
