"""Pydantic configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from luject.config.defaults import (
    ARM64_ARCH,
    ARM64_MARKER,
    DEFAULT_ALIGNMENT,
    DEFAULT_ARCH,
)


class ToolsConfig(BaseModel):
    # empty java_home means "read $JAVA_HOME when the signer runs"
    java_home: str | None = None
    zip: str | None = None
    zipalign: str | None = None
    file: str | None = None
    keytool: str | None = None


class SigningConfig(BaseModel):
    keystore: str | None = None
    alias: str = "test"
    storepass: str = "1234567890"
    digestalg: str = "SHA1"
    sigalg: str = "MD5withRSA"
    generate_keystore: bool = True


class ContainerConfig(BaseModel):
    default_arch: str = DEFAULT_ARCH
    arm64_arch: str = ARM64_ARCH
    arm64_marker: str = ARM64_MARKER
    arch: str | None = None
    library_extension: str = "so"
    signature_dir: str = "META-INF"
    alignment: int = DEFAULT_ALIGNMENT


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_output: bool = False
    # level for LIEF's own C++ logger while rewriting binaries
    lief_level: str = "ERROR"


class LujectConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    signing: SigningConfig = Field(default_factory=SigningConfig)
    container: ContainerConfig = Field(default_factory=ContainerConfig)
    resources_dir: str | None = None
    temp_dir: str | None = None
