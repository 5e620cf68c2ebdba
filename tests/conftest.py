"""Shared fixtures for the fastaparse tests."""

from __future__ import annotations

from typing import Iterable, List, Union

import pytest


class FlakyLines:
    """Line iterator that raises the exceptions placed among its items."""

    def __init__(self, items: Iterable[Union[str, BaseException]]):
        self._items = list(items)
        self.pulled: List[Union[str, BaseException]] = []

    def __iter__(self) -> "FlakyLines":
        return self

    def __next__(self) -> str:
        if not self._items:
            raise StopIteration
        item = self._items.pop(0)
        self.pulled.append(item)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def flaky_lines():
    return FlakyLines


@pytest.fixture
def example_lines() -> List[str]:
    return [
        ">a desc one",
        "ACGT",
        "ACGT",
        ";comment",
        ">b",
        "TTTT",
    ]
