"""Catalogue of named value patterns."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from praetorian.rules.base import RuleSeverity


class PatternType(str, Enum):
    email = "email"
    url = "url"
    phone = "phone"
    uuid = "uuid"
    version = "version"
    semver = "semver"
    ipv4 = "ipv4"
    ipv6 = "ipv6"
    hostname = "hostname"
    port = "port"
    path = "path"
    base64 = "base64"
    hex = "hex"
    alphanumeric = "alphanumeric"
    numeric = "numeric"
    alpha = "alpha"
    custom = "custom"


class PatternDefinition(BaseModel):
    """A reusable regular expression. ``required`` marks the primary one of its type."""

    id: str
    name: str
    description: str
    pattern: str
    flags: str = ""
    severity: RuleSeverity = RuleSeverity.error
    required: bool = False


def _p(
    pattern_id: str,
    name: str,
    description: str,
    pattern: str,
    flags: str = "",
    required: bool = False,
) -> PatternDefinition:
    return PatternDefinition(
        id=pattern_id,
        name=name,
        description=description,
        pattern=pattern,
        flags=flags,
        required=required,
    )


EMAIL = [
    _p("EMAIL_BASIC", "Basic Email", "Validates basic email format",
       r"^[^\s@]+@[^\s@]+\.[^\s@]+$", required=True),
    _p("EMAIL_STRICT", "Strict Email", "Validates strict email format with domain validation",
       r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"),
]

URL = [
    _p("URL_HTTP", "HTTP URL", "Validates HTTP/HTTPS URLs",
       r"^https?://[^\s/$.?#].[^\s]*$", required=True),
    _p("URL_STRICT", "Strict URL", "Validates strict URL format",
       r"^https?://(?:[\w\-]+\.)+[\w\-]+(?:/[\w\-._~:/?#\[\]@!$&'()*+,;=]*)?$"),
]

PHONE = [
    _p("PHONE_INTERNATIONAL", "International Phone", "Validates E.164 phone numbers",
       r"^\+[1-9]\d{1,14}$", required=True),
    _p("PHONE_US", "US Phone", "Validates US phone numbers",
       r"^\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})$"),
]

UUID = [
    _p("UUID_V4", "UUID v4", "Validates UUID v4 format",
       r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
       flags="i", required=True),
    _p("UUID_ANY", "Any UUID", "Validates any UUID format",
       r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", flags="i"),
]

VERSION = [
    _p("VERSION_SEMVER", "Semantic Version", "Validates semantic versioning format",
       r"^\d+\.\d+\.\d+(-[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*)?(\+[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*)?$",
       required=True),
    _p("VERSION_SIMPLE", "Simple Version", "Validates simple version format (x.y.z)",
       r"^\d+\.\d+\.\d+$"),
]

IP = [
    _p("IPV4", "IPv4 Address", "Validates IPv4 addresses",
       r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$",
       required=True),
    _p("IPV6", "IPv6 Address", "Validates full-form IPv6 addresses",
       r"^(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}$"),
]

HOSTNAME = [
    _p("HOSTNAME_BASIC", "Basic Hostname", "Validates basic hostname format",
       r"^[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(\.([a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?))*$",
       required=True),
]

PORT = [
    _p("PORT_RANGE", "Port Range", "Validates port numbers (1-65535)",
       r"^([1-9][0-9]{0,3}|[1-5][0-9]{4}|6[0-4][0-9]{3}|65[0-4][0-9]{2}|655[0-2][0-9]|6553[0-5])$",
       required=True),
]

PATH = [
    _p("PATH_UNIX", "Unix Path", "Validates Unix-style file paths",
       r"^(/[^/ ]*)+/?$", required=True),
    _p("PATH_WINDOWS", "Windows Path", "Validates Windows-style file paths",
       r'^[a-zA-Z]:\\([^\\/:*?"<>|\r\n]+\\)*[^\\/:*?"<>|\r\n]*$'),
]

FORMAT = [
    _p("BASE64", "Base64", "Validates Base64 encoded strings",
       r"^[A-Za-z0-9+/]*={0,2}$", required=True),
    _p("HEX", "Hexadecimal", "Validates hexadecimal strings",
       r"^[0-9a-fA-F]+$", required=True),
]

TEXT = [
    _p("ALPHANUMERIC", "Alphanumeric", "Letters and digits only",
       r"^[a-zA-Z0-9]+$", required=True),
    _p("NUMERIC", "Numeric", "Digits only", r"^[0-9]+$", required=True),
    _p("ALPHA", "Alphabetic", "Letters only", r"^[a-zA-Z]+$", required=True),
]

PATTERNS_BY_TYPE: dict[PatternType, list[PatternDefinition]] = {
    PatternType.email: EMAIL,
    PatternType.url: URL,
    PatternType.phone: PHONE,
    PatternType.uuid: UUID,
    PatternType.version: VERSION,
    PatternType.semver: VERSION[:1],
    PatternType.ipv4: IP[:1],
    PatternType.ipv6: IP[1:],
    PatternType.hostname: HOSTNAME,
    PatternType.port: PORT,
    PatternType.path: PATH,
    PatternType.base64: FORMAT[:1],
    PatternType.hex: FORMAT[1:],
    PatternType.alphanumeric: TEXT[:1],
    PatternType.numeric: TEXT[1:2],
    PatternType.alpha: TEXT[2:],
    PatternType.custom: [],
}


def get_patterns_by_type(pattern_type: PatternType | str) -> list[PatternDefinition]:
    return list(PATTERNS_BY_TYPE.get(PatternType(pattern_type), []))


def get_pattern_by_id(pattern_id: str) -> PatternDefinition | None:
    for definitions in PATTERNS_BY_TYPE.values():
        for definition in definitions:
            if definition.id == pattern_id:
                return definition
    return None


def primary_pattern(pattern_type: PatternType | str) -> PatternDefinition:
    """The ``required`` definition of a type, falling back to its first."""
    definitions = get_patterns_by_type(pattern_type)
    if not definitions:
        raise ValueError(f"No catalogue pattern for type '{pattern_type}'")
    for definition in definitions:
        if definition.required:
            return definition
    return definitions[0]
