"""
View resolution: turns a controller result into an HTTP response.

A result is either ``redirect:<path>`` or a logical view name.  Logical
view names map to ``<name>.html`` templates.  Redirect paths may carry
``{name}`` placeholders that are filled from the request's path
variables, so ``redirect:/owners/{ownerId}`` goes back to the owner the
request was about.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import render

from .validation import ModelAndView

REDIRECT_PREFIX = 'redirect:'
_PLACEHOLDER = re.compile(r'\{(\w+)\}')


class TemplateViewResolver:
    def __init__(self, suffix: str = '.html'):
        self.suffix = suffix

    def template_for(self, view_name: str) -> str:
        return f'{view_name}{self.suffix}'

    def expand(self, target: str, path_variables: Optional[Mapping[str, Any]] = None) -> str:
        variables = path_variables or {}

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name not in variables:
                raise KeyError(f'no path variable named {name!r} for redirect {target!r}')
            return str(variables[name])

        return _PLACEHOLDER.sub(replace, target)

    def resolve(self, request: HttpRequest, result: str | ModelAndView,
                model: Optional[Mapping[str, Any]] = None,
                path_variables: Optional[Mapping[str, Any]] = None,
                status: int = 200) -> HttpResponse:
        if isinstance(result, ModelAndView):
            context = dict(model or {})
            context.update(result.model)
            return render(request, self.template_for(result.view_name), context, status=status)

        if result.startswith(REDIRECT_PREFIX):
            return HttpResponseRedirect(self.expand(result[len(REDIRECT_PREFIX):], path_variables))

        return render(request, self.template_for(result), dict(model or {}), status=status)
