"""
Utility modules for the review monitor.

Cross-cutting concerns:
- HTTP client: Authenticated page reads
- Event bus: Delivery of new-review events
"""
