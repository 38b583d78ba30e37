"""Current Kubernetes context and namespace from kubeconfig files."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path
from typing import Any

import yaml

from promptkit.utils import read_file


def _find_namespace(conf: dict[Any, Any], current_ctx: str) -> str:
    contexts = conf.get("contexts")
    if not isinstance(contexts, list):
        return ""
    for ctx in contexts:
        if not isinstance(ctx, dict) or not isinstance(ctx.get("name"), str):
            continue
        if ctx["name"] != current_ctx:
            continue
        context = ctx.get("context")
        if isinstance(context, dict) and isinstance(context.get("namespace"), str):
            return context["namespace"]
        return ""
    return ""


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """Return ``(context, namespace)`` from the text of a kubeconfig file.

    The namespace is empty when the current context sets none. Returns None
    for unparsable documents or when no current context is selected.
    """
    try:
        documents = list(yaml.safe_load_all(contents))
    except yaml.YAMLError:
        return None
    if not documents:
        return None

    conf = documents[0]
    if not isinstance(conf, dict):
        return None
    current_ctx = conf.get("current-context")
    if not isinstance(current_ctx, str) or not current_ctx:
        return None

    return current_ctx, _find_namespace(conf, current_ctx)


def parse_kubectl_file(filename: str | PathLike[str]) -> tuple[str, str] | None:
    """Read a kubeconfig file and return its current context and namespace."""
    try:
        contents = read_file(filename)
    except (OSError, UnicodeDecodeError):
        return None
    return get_kube_context(contents)


def current_kube_context() -> tuple[str, str] | None:
    """Return the active context from ``$KUBECONFIG`` or ``~/.kube/config``.

    With ``$KUBECONFIG`` set, its paths are tried in order and the first
    file that yields a context wins.
    """
    paths = os.environ.get("KUBECONFIG")
    if paths is not None:
        for filename in paths.split(os.pathsep):
            result = parse_kubectl_file(filename)
            if result is not None:
                return result
        return None

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    return parse_kubectl_file(home / ".kube" / "config")