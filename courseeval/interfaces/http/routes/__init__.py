# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Blueprint

from courseeval.interfaces.http.controllers.misc_controller import MiscController

if TYPE_CHECKING:
    from courseeval.infrastructure.container import Container


def build_blueprints(container: Container) -> list[Blueprint]:
    return [
        container.auth_controller.as_blueprint(),
        container.courses_controller.as_blueprint(),
        container.evaluations_controller.as_blueprint(),
        container.statistics_controller.as_blueprint(),
        MiscController().as_blueprint(),
    ]


__all__ = ["build_blueprints"]
