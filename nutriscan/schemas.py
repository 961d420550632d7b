# -*- coding: utf-8 -*-
"""Shared Pydantic bases: camelCase wire names + the success envelope."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[DataT]):
    status: str = "success"
    data: DataT


class MessageResponse(BaseModel):
    status: str = "success"
    message: str
