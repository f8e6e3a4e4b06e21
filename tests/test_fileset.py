"""Tests for FileSet resolution and deduplication."""

from __future__ import annotations

import logging

import pytest

from filebundler.fileset import FileSet, FileSetFrozenError
from tests._fixtures.webroot_builder import WebRootBuilder


def test_relative_paths_resolve_against_source_dir(webroot: WebRootBuilder) -> None:
    webroot.write({"/js/app.js": "var app;", "/vendor/lib.js": "var lib;"})
    file_set = FileSet(webroot.config(source_dir="/js"))

    file_set.add(["app.js", "/vendor/lib.js"])

    assert file_set.paths == ("/js/app.js", "/vendor/lib.js")
    assert file_set.content_type == "script"


def test_missing_files_are_dropped_with_warning(
    webroot: WebRootBuilder, caplog: pytest.LogCaptureFixture
) -> None:
    webroot.write({"/js/app.js": "var app;"})
    file_set = FileSet(webroot.config(source_dir="/js"))

    with caplog.at_level(logging.WARNING, logger="filebundler"):
        file_set.add(["missing.js", "app.js"])

    assert file_set.paths == ("/js/app.js",)
    assert "/js/missing.js doesn't exist" in caplog.text


def test_directories_are_not_bundle_members(webroot: WebRootBuilder) -> None:
    webroot.write({"/js/nested/inner.js": "1;"})
    file_set = FileSet(webroot.config(source_dir="/js"))

    file_set.add(["nested"])

    assert len(file_set) == 0


def test_duplicates_keep_first_occurrence(webroot: WebRootBuilder) -> None:
    webroot.write({"/js/a.js": "a", "/js/b.js": "b", "/js/c.js": "c"})
    file_set = FileSet(webroot.config(source_dir="/js"))

    file_set.add(["b.js", "a.js"])
    file_set.add_file("/js/b.js")
    file_set.add(["c.js", "a.js"])

    assert list(file_set) == ["/js/b.js", "/js/a.js", "/js/c.js"]
    assert "/js/c.js" in file_set


def test_constructor_accepts_initial_paths(webroot: WebRootBuilder) -> None:
    webroot.write({"/script/one.js": "1"})

    file_set = FileSet(webroot.config(), ["one.js"])

    assert file_set.paths == ("/script/one.js",)


def test_frozen_set_rejects_additions(webroot: WebRootBuilder) -> None:
    webroot.write({"/script/one.js": "1"})
    file_set = FileSet(webroot.config(), ["one.js"])

    file_set.freeze()

    with pytest.raises(FileSetFrozenError):
        file_set.add_file("one.js")


def test_debug_mode_traces_additions(
    webroot: WebRootBuilder, caplog: pytest.LogCaptureFixture
) -> None:
    webroot.write({"/script/one.js": "1"})
    file_set = FileSet(webroot.config(debug=True))

    with caplog.at_level(logging.DEBUG, logger="filebundler"):
        file_set.add(["one.js", "two.js"])

    assert "Adding files: one.js,two.js" in caplog.text
