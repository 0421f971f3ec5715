"""
Restaurant discovery and estimation.

Responsibilities:
- Annotate raw search results with distance, volume and wait-time estimates.
- Flag restaurants near the primary landmark and list nearby landmarks.
- Filter, order and mark restaurants for display.
- Provide the hourly volume history shown on the detail view.
"""
