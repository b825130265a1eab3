# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Minimal authenticated comment board."""

__version__ = "0.1.0"
