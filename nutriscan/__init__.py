# -*- coding: utf-8 -*-
"""NutriScan API - diet tracking backend (auth, food catalog, daily logs, analytics)."""

__version__ = "1.0.0"
