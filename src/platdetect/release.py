# Copyright (c) 2024 Platdetect Contributors
# MIT License

"""Platdetect release metadata."""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "Platdetect Contributors"
