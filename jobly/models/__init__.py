"""
Models for the Jobly API.

Each model is a class of static async methods that run parameterized SQL
against anything with the asyncpg ``fetch``/``fetchrow`` surface.
"""

from .company import Company
from .job import Job

__all__ = [
    "Company",
    "Job",
]
