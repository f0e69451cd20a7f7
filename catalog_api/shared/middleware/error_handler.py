# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from catalog_api.shared.errors import register_error_handler


def configure_error_handling(app: Flask) -> None:
    register_error_handler(app)
