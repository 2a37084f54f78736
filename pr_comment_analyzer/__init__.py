"""
PR Comment Analyzer

Counts the comments an authenticated GitHub user left across a set of pull
requests and reports how many minutes were spent per comment.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
