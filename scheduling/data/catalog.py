"""
Immutable term catalog.

A Catalog is built once by the CatalogLoader and then only read. It is passed
explicitly to the filter and search engines instead of living in global
state, so several terms (or catalog versions) can be served side by side.
"""

from types import MappingProxyType

from ..exceptions import CatalogError


class Catalog:
    """
    All usable courses for one term, in catalog order.

    Records that could not be parsed are kept aside in ``malformed`` (code ->
    error message) so that asking for one of them by code fails loudly
    instead of looking like an unknown course.

    Usage:
        catalog = loader.load_catalog("202420")
        course = catalog.require("CSCI 0320")
        if "MATH 0100" in catalog: ...
    """

    def __init__(self, term: str, courses, malformed=None):
        self._term = term
        by_code = {}
        for course in courses:
            # First record wins for duplicate codes
            by_code.setdefault(course.code, course)
        self._courses = tuple(by_code.values())
        self._by_code = MappingProxyType(by_code)
        self._malformed = MappingProxyType(dict(malformed or {}))

    @property
    def term(self) -> str:
        return self._term

    @property
    def courses(self) -> tuple:
        return self._courses

    @property
    def codes(self) -> list:
        return list(self._by_code)

    @property
    def malformed(self):
        return self._malformed

    def get(self, code: str):
        return self._by_code.get(code)

    def require(self, code: str):
        """
        Look up a course that the caller cannot do without.

        Raises:
            CatalogError: the code is unknown, or its record was skipped
                because required fields were missing
        """
        course = self._by_code.get(code)
        if course is not None:
            return course
        if code in self._malformed:
            raise CatalogError(self._malformed[code])
        raise CatalogError(f"Course not found in {self._term} catalog: {code}")

    def __contains__(self, code) -> bool:
        return code in self._by_code

    def __iter__(self):
        return iter(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __repr__(self) -> str:
        return f"Catalog(term={self._term!r}, courses={len(self._courses)})"
