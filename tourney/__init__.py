"""
Tournament Statistics - Core Package

This package contains the core modules for:
- Standings and highlight computation (tourney.stats)
- Tournament document ingestion (tourney.ingestion)
- Standings reports (tourney.report)
- Shared configuration and utilities
"""

from tourney.config import *
