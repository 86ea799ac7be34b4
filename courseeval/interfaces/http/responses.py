# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Response, jsonify
from pydantic import BaseModel


def envelope(
    data: Any = None,
    status: HTTPStatus = HTTPStatus.OK,
    msg: str = "Success",
) -> tuple[Response, int]:
    """Wrap a payload in the ``{code, data, msg}`` body every endpoint returns."""

    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        data = [
            item.model_dump(mode="json", by_alias=True) if isinstance(item, BaseModel) else item
            for item in data
        ]
    return jsonify({"code": int(status), "data": data, "msg": msg}), int(status)


__all__ = ["envelope"]
