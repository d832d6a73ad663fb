"""
Shared dependencies for routes.
"""

from fastapi import Request

from morse.core.translator import Translator


def get_translator(request: Request) -> Translator:
    return request.app.state.translator
