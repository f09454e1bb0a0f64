# -*- coding: utf-8 -*-
"""
tests

Test package for FreeMenu.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""
