"""File adapters that normalize configuration formats into canonical trees."""

from praetorian.adapters.base import FileAdapter
from praetorian.adapters.env_file import EnvFileAdapter
from praetorian.adapters.hcl_file import HclFileAdapter
from praetorian.adapters.ini_file import IniFileAdapter
from praetorian.adapters.json_file import JsonFileAdapter
from praetorian.adapters.plist_file import PlistFileAdapter
from praetorian.adapters.properties_file import PropertiesFileAdapter
from praetorian.adapters.registry import AdapterRegistry, default_adapters
from praetorian.adapters.toml_file import TomlFileAdapter
from praetorian.adapters.xml_file import XmlFileAdapter
from praetorian.adapters.yaml_file import YamlFileAdapter

__all__ = [
    "AdapterRegistry",
    "EnvFileAdapter",
    "FileAdapter",
    "HclFileAdapter",
    "IniFileAdapter",
    "JsonFileAdapter",
    "PlistFileAdapter",
    "PropertiesFileAdapter",
    "TomlFileAdapter",
    "XmlFileAdapter",
    "YamlFileAdapter",
    "default_adapters",
]
