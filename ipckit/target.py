"""Target description and the Unix domain socket feature flags it implies."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

__all__ = ["TargetTriplet", "collect_uds_features", "build_flags"]

_CFG_PREFIX = "cargo:rustc-cfg="


@dataclass(frozen=True)
class TargetTriplet:
    """The architecture, OS and C environment of a compilation target."""

    arch: str
    os: str
    env: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> TargetTriplet:
        """Read the target from build-time environment variables.

        Raises KeyError if the architecture or OS variable is missing.
        """
        if environ is None:
            environ = os.environ
        return cls(
            arch=environ["CARGO_CFG_TARGET_ARCH"],
            os=environ["CARGO_CFG_TARGET_OS"],
            env=environ.get("CARGO_CFG_TARGET_ENV"),
        )

    def arch_any(self, arches: Iterable[str]) -> bool:
        """Whether the architecture is one of ``arches``."""
        return self.arch in arches

    def os_any(self, oses: Iterable[str]) -> bool:
        """Whether the OS is one of ``oses``."""
        return self.os in oses

    def env_any(self, envs: Iterable[str]) -> bool:
        """Whether the environment is set and is one of ``envs``."""
        return self.env is not None and self.env in envs


def collect_uds_features(target: TargetTriplet) -> list[str]:
    """Return the Unix domain socket feature flags for ``target``, in emission order."""
    flags: list[str] = []
    uds = False
    scm_rights = True

    if (target.os == "linux" and target.env_any(("gnu", "musl", "musleabi", "musleabihf"))) or target.os_any(
        ("android", "emscripten", "fuchsia", "redox")
    ):
        uds = True
        flags.append("uds_sockaddr_un_len_108")
        if target.os != "emscripten":
            flags += ["uds_ucred", "uds_scm_credentials", "uds_peercred"]
        if (
            (target.os == "linux" and target.env == "gnu")
            or (target.os == "linux" and target.env == "uclibc" and target.arch_any(("x86_64", "mips64")))
            or target.os == "android"
        ):
            flags += ["uds_msghdr_iovlen_size_t", "uds_msghdr_controllen_size_t"]
        else:
            flags += ["uds_msghdr_iovlen_c_int", "uds_msghdr_controllen_socklen_t"]
        if target.os_any(("linux", "android")):
            flags.append("uds_linux_namespace")
    elif target.env == "newlib" and target.arch == "xtensa":
        uds = True
        scm_rights = False
        flags += [
            "sockaddr_un_len_108",
            "uds_msghdr_iovlen_c_int",
            "uds_msghdr_controllen_socklen_t",
        ]
    elif target.os_any(("freebsd", "openbsd", "netbsd", "dragonfly", "macos", "ios")):
        uds = True
        flags += [
            "uds_sockaddr_un_len_104",
            "uds_msghdr_iovlen_c_int",
            "uds_msghdr_controllen_socklen_t",
            "uds_xucred",
        ]
        if target.os == "netbsd":
            flags += ["uds_sockcred", "uds_peereid"]
        elif target.os_any(("freebsd", "dragonfly", "macos", "ios")):
            flags.append("uds_xucred")
    elif target.os_any(("solaris", "illumos")):
        uds = True
        flags += [
            "uds_sockaddr_un_len_108",
            "uds_getpeerucred",
            "uds_msghdr_iovlen_c_int",
            "uds_msghdr_controllen_socklen_t",
        ]
    elif target.os == "haiku":
        uds = True
        flags += [
            "uds_sockaddr_un_len_126",
            "uds_ucred",
            "uds_peercred",
            "uds_msghdr_iovlen_c_int",
            "uds_msghdr_controllen_socklen_t",
        ]

    if uds:
        if scm_rights:
            flags.append("uds_scm_rights")
        if not target.arch_any(("x86", "x86_64")):
            flags.append("uds_ancillary_unsound")
        flags.append("uds_supported")
    return flags


def build_flags(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the configuration directives for the target described by ``environ``.

    Nothing is produced unless the target is a Unix one.
    """
    if environ is None:
        environ = os.environ
    if "CARGO_CFG_UNIX" not in environ:
        return []
    target = TargetTriplet.from_environ(environ)
    return [_CFG_PREFIX + flag for flag in collect_uds_features(target)]