# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import INSECURE_DEFAULT_SECRET, AppConfig, AuthConfig, load_config

__all__ = ["AppConfig", "AuthConfig", "INSECURE_DEFAULT_SECRET", "load_config"]
