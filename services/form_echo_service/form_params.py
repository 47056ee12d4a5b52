"""Parameter-set construction and HTML echo rendering for submitted forms."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping

from werkzeug.datastructures import MultiDict

ParamValue = str | list[str]
ParameterSet = dict[str, ParamValue]

ARRAY_KEY_SUFFIX = "[]"

GET_FORM_HEADING = "GET Form Submitted"
POST_FORM_HEADING = "POST Form Submitted"


def build_parameter_set(pairs: Iterable[tuple[str, str]]) -> ParameterSet:
    """
    Fold parsed key/value pairs into a parameter set.

    Keys keep the order of their first appearance. A key seen more than once
    collects its values into a list; a key with a trailing ``[]`` is stored
    under its bare name and always holds a list.
    """
    params: ParameterSet = {}
    for raw_key, value in pairs:
        is_array_key = raw_key.endswith(ARRAY_KEY_SUFFIX) and len(raw_key) > len(ARRAY_KEY_SUFFIX)
        key = raw_key[: -len(ARRAY_KEY_SUFFIX)] if is_array_key else raw_key

        existing = params.get(key)
        if existing is None:
            params[key] = [value] if is_array_key else value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            params[key] = [existing, value]
    return params


def parameter_set_from_multidict(multidict: MultiDict) -> ParameterSet:
    """Build a parameter set from a request's ``args`` or ``form`` MultiDict."""
    return build_parameter_set(multidict.items(multi=True))


def render_parameter_json(params: Mapping[str, ParamValue]) -> str:
    """Compact JSON object with keys in parser order and literal non-ASCII text."""
    return json.dumps(params, separators=(",", ":"), ensure_ascii=False)


def render_submission_fragment(heading: str, params: Mapping[str, ParamValue]) -> str:
    # No HTML escaping of the JSON
    return f"<h1>{heading}</h1><p>{render_parameter_json(params)}</p>"
