# -*- coding: utf-8 -*-
from .formatter import format_result, initial_result_text

__all__ = ["format_result", "initial_result_text"]
