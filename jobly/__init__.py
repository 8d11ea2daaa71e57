"""
Jobly: a small REST API for companies and jobs.
"""
