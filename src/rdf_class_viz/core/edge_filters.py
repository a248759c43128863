"""
Edge Filters

Per-row predicates deciding whether a (from-class, to-class, predicate)
relationship makes it into the class graph. The graph builder only depends
on the EdgeFilter interface; concrete filters are chosen at configuration time.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from RestrictedPython import compile_restricted, safe_builtins
from RestrictedPython.Eval import default_guarded_getitem, default_guarded_getiter
from RestrictedPython.Guards import guarded_iter_unpack_sequence, safer_getattr

from ..exceptions import FilterScriptError

logger = logging.getLogger(__name__)

FilterFn = Callable[[str, str, str], bool]

# Builtins visible to filter scripts; no import, open, eval, exec or getattr
SCRIPT_BUILTINS = dict(safe_builtins, all=all, any=any, max=max, min=min)


def script_globals(name: str) -> Dict[str, Any]:
    """Fresh globals for a restricted filter script, with the guards its bytecode calls"""
    return {
        "__builtins__": dict(SCRIPT_BUILTINS),
        "__name__": name,
        "_getattr_": safer_getattr,
        "_getitem_": default_guarded_getitem,
        "_getiter_": default_guarded_getiter,
        "_iter_unpack_sequence_": guarded_iter_unpack_sequence,
    }


class EdgeFilter(ABC):
    """Decides whether a relationship row is kept"""

    @abstractmethod
    def decide(self, from_term: str, to_term: str, edge: str) -> bool:
        """Called with the raw N-Triples text of from-class, to-class and predicate"""
        pass

    def __call__(self, from_term: str, to_term: str, edge: str) -> bool:
        return self.decide(from_term, to_term, edge)


class AcceptAllFilter(EdgeFilter):
    """Keeps every row"""

    def decide(self, from_term: str, to_term: str, edge: str) -> bool:
        return True


class CallableEdgeFilter(EdgeFilter):
    """Adapts a plain Python callable of three strings"""

    def __init__(self, func: FilterFn):
        self.func = func

    def decide(self, from_term: str, to_term: str, edge: str) -> bool:
        return bool(self.func(from_term, to_term, edge))


class PredicateContainsFilter(EdgeFilter):
    """Keeps rows whose predicate text contains a substring"""

    def __init__(self, substring: str):
        self.substring = substring

    def decide(self, from_term: str, to_term: str, edge: str) -> bool:
        return self.substring in edge


class ScriptEdgeFilter(EdgeFilter):
    """
    Runs a user-supplied Python script defining `filter(from_, to, edge)`.
    The script is compiled with RestrictedPython, so names and attributes
    starting with an underscore are rejected and only safe builtins exist;
    `filter` is then called for every row.
    """

    FUNCTION_NAME = "filter"

    def __init__(self, source: str, name: str = "<filter>"):
        self.name = name
        self._namespace = script_globals(name)

        try:
            code = compile_restricted(source, filename=name, mode="exec")
            exec(code, self._namespace)
        except Exception as e:
            logger.error(f"Failed to load filter script {name}: {e}")
            raise FilterScriptError(f"Failed to load filter script {name}: {e}") from e

        func = self._namespace.get(self.FUNCTION_NAME)
        if not callable(func):
            raise FilterScriptError(f"Filter script {name} does not define a callable '{self.FUNCTION_NAME}'")
        self._func: FilterFn = func

    @classmethod
    def from_file(cls, path: str) -> "ScriptEdgeFilter":
        """Load a filter script from disk"""
        script_path = Path(path)
        if not script_path.exists():
            raise FilterScriptError(f"Filter script not found: {path}")

        logger.info(f"Loading edge filter script from {path}")
        return cls(script_path.read_text(encoding="utf-8"), name=str(script_path))

    @classmethod
    def from_source(cls, source: str) -> "ScriptEdgeFilter":
        return cls(source)

    def decide(self, from_term: str, to_term: str, edge: str) -> bool:
        try:
            result = self._func(from_term, to_term, edge)
        except Exception as e:
            logger.error(f"Filter script {self.name} raised on ({from_term}, {to_term}, {edge}): {e}")
            raise FilterScriptError(f"Filter script {self.name} raised: {e}") from e

        if not isinstance(result, bool):
            raise FilterScriptError(
                f"Filter script {self.name} returned {type(result).__name__}, expected bool"
            )
        return result


def make_edge_filter(func: Optional[FilterFn] = None) -> EdgeFilter:
    """Wrap a callable (or nothing) into an EdgeFilter"""
    if func is None:
        return AcceptAllFilter()
    if isinstance(func, EdgeFilter):
        return func
    return CallableEdgeFilter(func)
