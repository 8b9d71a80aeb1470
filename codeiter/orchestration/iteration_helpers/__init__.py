# -*- coding: utf-8 -*-
"""
iteration_helpers package
=========================

Small, focused helper modules used by CodeIterator.
Each file has a single responsibility:
- json_parser: safe extraction of a JSON object from raw LLM text.
- field_normalizer: guarantee both result fields are populated.
- compose_texts: build system/user messages (and the retry hint).
"""
