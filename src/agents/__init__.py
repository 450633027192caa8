"""
Pipeline stages for the review monitor.

Each cycle runs the stages in order:
- Profile Fetcher
- Review Extractor
- Review Change Detector
- Rating aggregation (stats query only)
"""
