"""Development re-signing of APK containers with jarsigner."""

from __future__ import annotations

from pathlib import Path

from luject.config.defaults import KEYSTORE_FILE_NAME
from luject.config.models import LujectConfig
from luject.errors import InputNotFoundError
from luject.tools.locator import ToolLocator
from luject.utils.logging import get_logger
from luject.utils.process import run_tool

log = get_logger(__name__)

# Throwaway test credential; never use it to ship anything.
_KEYSTORE_DNAME = "CN=luject test, OU=Development, O=luject, C=US"


class Signer:
    """Signs an unsigned container with a fixed development keystore."""

    def __init__(self, config: LujectConfig, locator: ToolLocator, verbose: bool = False) -> None:
        self._config = config
        self._locator = locator
        self._verbose = verbose

    def keystore_path(self) -> Path:
        if self._config.signing.keystore:
            return Path(self._config.signing.keystore).expanduser()
        return self._locator.resources_dir() / KEYSTORE_FILE_NAME

    def ensure_keystore(self) -> Path:
        keystore = self.keystore_path()
        if keystore.is_file():
            return keystore
        if not self._config.signing.generate_keystore:
            raise InputNotFoundError(keystore, "keystore")

        signing = self._config.signing
        keytool = self._locator.keytool()
        keystore.parent.mkdir(parents=True, exist_ok=True)
        log.info("generating_keystore", path=str(keystore))
        run_tool(
            [
                keytool, "-genkeypair",
                "-keystore", keystore,
                "-alias", signing.alias,
                "-storepass", signing.storepass,
                "-keypass", signing.storepass,
                "-keyalg", "RSA",
                "-keysize", "2048",
                "-validity", "10000",
                "-dname", _KEYSTORE_DNAME,
            ],
            verbose=self._verbose,
        )
        return keystore

    def build_argv(self, jarsigner: Path, keystore: Path, unsigned: Path, signed: Path) -> list[str]:
        signing = self._config.signing
        argv = [
            str(jarsigner),
            "-keystore", str(keystore),
            "-signedjar", str(signed),
            "-digestalg", signing.digestalg,
            "-sigalg", signing.sigalg,
            str(unsigned),
            signing.alias,
            "--storepass", signing.storepass,
        ]
        if self._verbose:
            argv.append("-verbose")
        return argv

    def sign(self, unsigned: Path, signed: Path) -> Path:
        jarsigner = self._locator.jarsigner()
        keystore = self.ensure_keystore()
        signed.parent.mkdir(parents=True, exist_ok=True)
        run_tool(self.build_argv(jarsigner, keystore, unsigned, signed), verbose=self._verbose)
        log.info("container_signed", output=str(signed))
        return signed
