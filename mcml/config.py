"""Launcher configuration objects and their JSON form."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional

from mcml.core import VERSION


class SourceLocal(IntEnum):
    """Download source."""

    OFFICIAL = 0
    BMCLAPI = 1


class GCType(IntEnum):
    """JVM garbage collector choice."""

    AUTO = 0
    G1GC = 1
    ZGC = 2
    NONE = 3


Parser = Callable[[str, Any], Any]


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class _Field:
    attr: str
    key: str
    parse: Parser
    dump: Callable[[Any], Any] = _identity


def _string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _boolean(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


def _unsigned(bits: int) -> Parser:
    limit = (1 << bits) - 1

    def parse(key: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= limit:
            raise ValueError(f"{key}: expected an integer in 0..{limit}, got {value!r}")
        return value

    return parse


def _enum(cls: type[IntEnum]) -> Parser:
    def parse(key: str, value: Any) -> IntEnum:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{key}: expected an integer, got {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"{key}: invalid {cls.__name__} value {value!r}") from None

    return parse


def _optional(parse: Parser) -> Parser:
    return lambda key, value: None if value is None else parse(key, value)


def _optional_dump(dump: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: None if value is None else dump(value)


def _list_of(parse: Parser) -> Parser:
    def parse_list(key: str, value: Any) -> list:
        if not isinstance(value, list):
            raise ValueError(f"{key}: expected a list, got {value!r}")
        return [parse(key, item) for item in value]

    return parse_list


def _nested(cls: Any) -> Parser:
    return lambda key, value: cls.from_dict(value)


def _dump(obj: Any, fields: tuple[_Field, ...]) -> dict[str, Any]:
    return {f.key: f.dump(getattr(obj, f.attr)) for f in fields}


def _load(cls: Any, data: Any, fields: tuple[_Field, ...]) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{cls.__name__}: expected an object, got {data!r}")
    return cls(**{f.attr: f.parse(f.key, data[f.key]) for f in fields if f.key in data})


@dataclass
class JvmConfigObj:
    """A known Java installation."""

    name: str = ""
    local: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, _JVM_FIELDS)

    @classmethod
    def from_dict(cls, data: Any) -> JvmConfigObj:
        return _load(cls, data, _JVM_FIELDS)


_JVM_FIELDS = (
    _Field("name", "Name", _string),
    _Field("local", "Local", _string),
)


@dataclass
class HttpObj:
    """Network settings."""

    source: SourceLocal = SourceLocal.OFFICIAL
    download_thread: int = 5
    proxy_ip: str = "127.0.0.1"
    proxy_port: int = 7890
    proxy_user: str = ""
    proxy_password: str = ""
    login_proxy: bool = False
    download_proxy: bool = False
    game_proxy: bool = False
    check_file: bool = True
    auto_download: bool = True

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, _HTTP_FIELDS)

    @classmethod
    def from_dict(cls, data: Any) -> HttpObj:
        return _load(cls, data, _HTTP_FIELDS)


_HTTP_FIELDS = (
    _Field("source", "Source", _enum(SourceLocal), int),
    _Field("download_thread", "DownloadThread", _unsigned(32)),
    _Field("proxy_ip", "ProxyIP", _string),
    _Field("proxy_port", "ProxyPort", _unsigned(16)),
    _Field("proxy_user", "ProxyUser", _string),
    _Field("proxy_password", "ProxyPassword", _string),
    _Field("login_proxy", "LoginProxy", _boolean),
    _Field("download_proxy", "DownloadProxy", _boolean),
    _Field("game_proxy", "GameProxy", _boolean),
    _Field("check_file", "CheckFile", _boolean),
    _Field("auto_download", "AutoDownload", _boolean),
)


@dataclass
class DnsObj:
    """Custom DNS-over-HTTPS settings."""

    enable: bool = False
    https: list[str] = field(default_factory=list)
    http_proxy: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, _DNS_FIELDS)

    @classmethod
    def from_dict(cls, data: Any) -> DnsObj:
        return _load(cls, data, _DNS_FIELDS)


_DNS_FIELDS = (
    _Field("enable", "Enable", _boolean),
    _Field("https", "Https", _list_of(_string), list),
    _Field("http_proxy", "HttpProxy", _boolean),
)


@dataclass
class RunArgObj:
    """Launch arguments; unset fields are None."""

    remove_jvm_arg: Optional[bool] = None
    remove_game_arg: Optional[bool] = None
    jvm_args: Optional[str] = None
    game_args: Optional[str] = None
    jvm_env: Optional[str] = None
    gc_mode: Optional[GCType] = None
    max_memory: Optional[int] = None
    min_memory: Optional[int] = None
    color_asm: Optional[bool] = None
    launch_pre_run: Optional[bool] = None
    pre_run_with_game: Optional[bool] = None
    launch_post_run: Optional[bool] = None
    pre_run_arg: Optional[str] = None
    post_run_arg: Optional[str] = None

    @classmethod
    def with_defaults(cls) -> RunArgObj:
        """Launch arguments with every field set to its default."""
        return cls(
            remove_jvm_arg=False,
            remove_game_arg=False,
            jvm_args="",
            game_args="",
            jvm_env="",
            gc_mode=GCType.AUTO,
            max_memory=512,
            min_memory=4096,
            color_asm=False,
            launch_pre_run=False,
            pre_run_with_game=True,
            launch_post_run=False,
            pre_run_arg="",
            post_run_arg="",
        )

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, _RUN_ARG_FIELDS)

    @classmethod
    def from_dict(cls, data: Any) -> RunArgObj:
        return _load(cls, data, _RUN_ARG_FIELDS)


_OPT_BOOL = _optional(_boolean)
_OPT_STR = _optional(_string)
_OPT_U16 = _optional(_unsigned(16))
_OPT_U32 = _optional(_unsigned(32))

_RUN_ARG_FIELDS = (
    _Field("remove_jvm_arg", "RemoveJvmArg", _OPT_BOOL),
    _Field("remove_game_arg", "RemoveGameArg", _OPT_BOOL),
    _Field("jvm_args", "JvmArgs", _OPT_STR),
    _Field("game_args", "GameArgs", _OPT_STR),
    _Field("jvm_env", "JvmEnv", _OPT_STR),
    _Field("gc_mode", "GC", _optional(_enum(GCType)), _optional_dump(int)),
    _Field("max_memory", "MaxMemory", _OPT_U32),
    _Field("min_memory", "MinMemory", _OPT_U32),
    _Field("color_asm", "ColorASM", _OPT_BOOL),
    _Field("launch_pre_run", "LaunchPre", _OPT_BOOL),
    _Field("pre_run_with_game", "PreRunSame", _OPT_BOOL),
    _Field("launch_post_run", "LaunchPost", _OPT_BOOL),
    _Field("pre_run_arg", "LaunchPreData", _OPT_STR),
    _Field("post_run_arg", "LaunchPostData", _OPT_STR),
)


@dataclass
class WindowSettingObj:
    """Game window settings; unset fields are None."""

    full_screen: Optional[bool] = None
    width: Optional[int] = None
    height: Optional[int] = None
    game_title: Optional[str] = None
    edit_title: Optional[bool] = None
    random_title: Optional[bool] = None
    cycle_title: Optional[bool] = None
    title_delay: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, _WINDOW_FIELDS)

    @classmethod
    def from_dict(cls, data: Any) -> WindowSettingObj:
        return _load(cls, data, _WINDOW_FIELDS)


_WINDOW_FIELDS = (
    _Field("full_screen", "FullScreen", _OPT_BOOL),
    _Field("width", "Width", _OPT_U16),
    _Field("height", "Height", _OPT_U16),
    _Field("game_title", "GameTitle", _OPT_STR),
    _Field("edit_title", "EditTitle", _OPT_BOOL),
    _Field("random_title", "RandomTitle", _OPT_BOOL),
    _Field("cycle_title", "CycTitle", _OPT_BOOL),
    _Field("title_delay", "TitleDelay", _OPT_U32),
)


@dataclass
class ConfigObj:
    """The whole launcher configuration."""

    version: str = VERSION
    java_list: list[JvmConfigObj] = field(default_factory=list)
    http: HttpObj = field(default_factory=HttpObj)
    dns: DnsObj = field(default_factory=DnsObj)
    jvm_arg: RunArgObj = field(default_factory=RunArgObj.with_defaults)
    window: WindowSettingObj = field(default_factory=WindowSettingObj)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, _CONFIG_FIELDS)

    @classmethod
    def from_dict(cls, data: Any) -> ConfigObj:
        return _load(cls, data, _CONFIG_FIELDS)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @classmethod
    def from_json(cls, text: str) -> ConfigObj:
        """Parse a configuration; raises ValueError on malformed input."""
        return cls.from_dict(json.loads(text))


_CONFIG_FIELDS = (
    _Field("version", "Version", _string),
    _Field(
        "java_list",
        "JavaList",
        _list_of(_nested(JvmConfigObj)),
        lambda items: [item.to_dict() for item in items],
    ),
    _Field("http", "Http", _nested(HttpObj), HttpObj.to_dict),
    _Field("dns", "Dns", _nested(DnsObj), DnsObj.to_dict),
    _Field("jvm_arg", "DefaultJvmArg", _nested(RunArgObj), RunArgObj.to_dict),
    _Field("window", "Window", _nested(WindowSettingObj), WindowSettingObj.to_dict),
)