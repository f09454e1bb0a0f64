# -*- coding: utf-8 -*-
"""
configuration

Configuration helpers for FreeMenu core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import FreeMenuSettings, configure, current_settings, reset_settings

__all__ = ["FreeMenuSettings", "configure", "current_settings", "reset_settings"]


# The End
