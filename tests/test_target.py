import pytest

from ipckit.target import TargetTriplet, build_flags, collect_uds_features


def test_linux_gnu_x86_64():
    flags = collect_uds_features(TargetTriplet("x86_64", "linux", "gnu"))
    assert "uds_sockaddr_un_len_108" in flags
    assert "uds_ucred" in flags
    assert "uds_peercred" in flags
    assert "uds_msghdr_iovlen_size_t" in flags
    assert "uds_linux_namespace" in flags
    assert "uds_scm_rights" in flags
    assert "uds_ancillary_unsound" not in flags
    assert flags[-1] == "uds_supported"


def test_linux_musl_aarch64_uses_c_int_and_is_unsound():
    flags = collect_uds_features(TargetTriplet("aarch64", "linux", "musl"))
    assert "uds_msghdr_iovlen_c_int" in flags
    assert "uds_msghdr_controllen_socklen_t" in flags
    assert "uds_msghdr_iovlen_size_t" not in flags
    assert "uds_ancillary_unsound" in flags


def test_emscripten_has_no_credentials():
    flags = collect_uds_features(TargetTriplet("wasm32", "emscripten", None))
    assert "uds_ucred" not in flags
    assert "uds_linux_namespace" not in flags
    assert "uds_supported" in flags


def test_netbsd_uses_sockcred():
    flags = collect_uds_features(TargetTriplet("x86_64", "netbsd", None))
    assert "uds_sockcred" in flags
    assert "uds_peereid" in flags
    assert "uds_sockaddr_un_len_104" in flags


def test_macos_emits_xucred_twice():
    flags = collect_uds_features(TargetTriplet("aarch64", "macos", None))
    assert flags.count("uds_xucred") == 2


def test_xtensa_newlib_has_no_scm_rights():
    flags = collect_uds_features(TargetTriplet("xtensa", "espidf", "newlib"))
    assert "uds_scm_rights" not in flags
    assert "uds_supported" in flags


def test_haiku_path_length():
    flags = collect_uds_features(TargetTriplet("x86_64", "haiku", None))
    assert "uds_sockaddr_un_len_126" in flags


def test_unknown_os_has_no_uds():
    assert collect_uds_features(TargetTriplet("x86_64", "windows", "msvc")) == []


def test_env_any_without_env_is_false():
    target = TargetTriplet("x86_64", "linux", None)
    assert target.env_any(["gnu", "musl"]) is False
    assert target.os_any(["linux"]) is True
    assert target.arch_any(["x86"]) is False


def test_from_environ_reads_fields():
    target = TargetTriplet.from_environ(
        {"CARGO_CFG_TARGET_ARCH": "x86_64", "CARGO_CFG_TARGET_OS": "linux"}
    )
    assert target == TargetTriplet("x86_64", "linux", None)


def test_from_environ_missing_arch():
    with pytest.raises(KeyError):
        TargetTriplet.from_environ({"CARGO_CFG_TARGET_OS": "linux"})


def test_build_flags_non_unix_is_empty():
    assert build_flags({"CARGO_CFG_TARGET_ARCH": "x86_64", "CARGO_CFG_TARGET_OS": "windows"}) == []


def test_build_flags_unix_prefixes_every_flag():
    environ = {
        "CARGO_CFG_UNIX": "",
        "CARGO_CFG_TARGET_ARCH": "x86_64",
        "CARGO_CFG_TARGET_OS": "linux",
        "CARGO_CFG_TARGET_ENV": "gnu",
    }
    lines = build_flags(environ)
    expected = collect_uds_features(TargetTriplet.from_environ(environ))
    assert [line.removeprefix("cargo:rustc-cfg=") for line in lines] == expected
    assert all(line.startswith("cargo:rustc-cfg=") for line in lines)