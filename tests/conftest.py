"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from helpers import (
    CopySigner,
    NoopAligner,
    PyZipArchiver,
    RecordingInjector,
    StubClassifier,
    build_apk,
)
from luject.config.models import ContainerConfig, LujectConfig
from luject.tools.locator import ToolLocator


@pytest.fixture
def sample_config(tmp_path) -> LujectConfig:
    return LujectConfig(
        resources_dir=str(tmp_path / "res"),
        temp_dir=str(tmp_path / "work"),
        container=ContainerConfig(),
    )


@pytest.fixture
def locator(sample_config) -> ToolLocator:
    return ToolLocator(sample_config)


@pytest.fixture
def hook_library(tmp_path) -> Path:
    lib = tmp_path / "libs" / "hook.so"
    lib.parent.mkdir(parents=True, exist_ok=True)
    lib.write_bytes(b"\x7fELF hook")
    return lib


@pytest.fixture
def sample_apk(tmp_path) -> Path:
    return build_apk(
        tmp_path / "sample.apk",
        {
            "AndroidManifest.xml": b"<manifest/>",
            "classes.dex": b"dex\n035",
            "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0",
            "META-INF/CERT.RSA": b"old signature",
            "lib/armeabi-v7a/libmain.so": b"\x7fELF arm32 main",
            "lib/arm64-v8a/libmain.so": b"\x7fELF arm64 main",
            "lib/arm64-v8a/libutil.so": b"\x7fELF arm64 util",
            "lib/arm64-v8a/README.txt": b"not a library",
        },
    )


@pytest.fixture
def make_repackager(sample_config, locator):
    """Factory for a ContainerRepackager wired to fakes; returns it with its collaborators."""
    from luject.injection.repackager import ContainerRepackager

    def _make(config=None, probe_text=None, injector=None, aligner=None, signer=None):
        config = config or sample_config
        injector = injector or RecordingInjector()
        signer = signer or CopySigner()
        aligner = aligner or NoopAligner()
        repackager = ContainerRepackager(
            config,
            locator,
            elf_injector=injector,
            archiver=PyZipArchiver(locator),
            signer=signer,
            aligner=aligner,
            classifier=StubClassifier(locator, probe_text),
        )
        return repackager, injector, signer, aligner

    return _make
