"""
Catalog loading and caching.

This module reads the pre-ingested course catalog from disk and builds one
immutable Catalog per requested term.
"""

import json
from pathlib import Path

from ..config import CATALOG_FILE
from ..exceptions import CatalogLoadError, CourseRecordError
from ..logger import get_logger
from .catalog import Catalog
from .parser import CourseRecordParser

log = get_logger("loader")


class CatalogLoader:
    """
    Loads and caches the course catalog file.

    WHY CACHING: The formatted catalog holds every section of every term the
    scraper has seen. Reading and parsing it once per process keeps planning
    requests cheap; each term's Catalog is built on first use and reused.

    WHY FAIL FAST: A missing file, invalid JSON, or a document without a
    "results" array raises CatalogLoadError. The planner must never run on a
    partially loaded catalog.

    Individual bad records are a different matter: they are skipped (and
    logged) so one broken row does not take the whole term down. Their codes
    are remembered so Catalog.require() can report exactly what was missing.

    Usage:
        loader = CatalogLoader()                 # uses config.CATALOG_FILE
        catalog = loader.load_catalog("202420")  # Spring 2025
        terms = loader.available_terms()
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else CATALOG_FILE
        self.parser = CourseRecordParser()
        # Private cache variables - None means "not loaded yet"
        self._document = None
        self._catalogs = {}  # Keyed by term code

    @property
    def document(self) -> dict:
        """The raw catalog document, read on first access."""
        if self._document is None:
            self._document = self._read_document()
        return self._document

    @property
    def records(self) -> list:
        return self.document["results"]

    def _read_document(self) -> dict:
        if not self.path.exists():
            raise CatalogLoadError(f"Catalog file not found: {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Catalog file is not valid JSON: {self.path} ({e})") from e
        except UnicodeDecodeError as e:
            raise CatalogLoadError(f"Catalog file is not valid UTF-8: {self.path} ({e})") from e
        except OSError as e:
            raise CatalogLoadError(f"Could not read catalog file: {self.path} ({e})") from e

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise CatalogLoadError(f"Catalog file has no 'results' array: {self.path}")

        log.info("Loaded catalog %s (%d records)", self.path, len(data["results"]))
        return data

    def load_catalog(self, term: str) -> Catalog:
        """
        Build (or return the cached) Catalog for a single term.

        Args:
            term: Term code as stored in each record's "srcdb" (e.g., "202420")

        Returns:
            Catalog with every well-formed record of that term
        """
        term = str(term)
        if term not in self._catalogs:
            self._catalogs[term] = self._build_catalog(term)
        return self._catalogs[term]

    def _build_catalog(self, term: str) -> Catalog:
        courses = []
        malformed = {}

        for record in self.records:
            record_term = record.get("srcdb") if isinstance(record, dict) else None
            # Records without a term cannot be placed; count them against
            # every term so a lookup by code still explains itself.
            if record_term is not None and str(record_term) != term:
                continue
            try:
                course = self.parser.parse(record)
            except CourseRecordError as e:
                log.warning("Skipping catalog record: %s", e)
                if isinstance(e.code, str) and e.code:
                    malformed.setdefault(e.code, str(e))
                continue
            courses.append(course)

        catalog = Catalog(term, courses, malformed)
        if not catalog:
            log.warning("Catalog for term %s is empty", term)
        else:
            log.info("Term %s: %d courses (%d malformed records skipped)", term, len(catalog), len(malformed))
        return catalog

    def available_terms(self) -> list:
        """List every term code present in the catalog file."""
        terms = set()
        for record in self.records:
            if isinstance(record, dict) and record.get("srcdb") is not None:
                terms.add(str(record["srcdb"]))
        return sorted(terms)
