# -*- coding: utf-8 -*-
"""Uploads - Pydantic models."""

from __future__ import annotations

from ..schemas import CamelModel


class UploadResult(CamelModel):
    url: str
    filename: str
