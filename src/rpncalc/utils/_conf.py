import configparser
import logging
import os

from rpncalc.utils._version import version

logger = logging.getLogger("rpncalc.utils.conf")

ENV_PREFIX = "RPNCALC_"

CONFIG_FILES = [
    os.path.expanduser("~/.rpncalcrc"),  # User-specific config
    "/etc/rpncalc.ini",  # System-wide config
    "rpncalc.ini",  # Local directory config
]


class ConfigSection:
    """Wrapper for a config section to allow attribute-style access to options."""

    def __init__(self, section):
        self._section = section

    def __getattr__(self, name):
        if name in self._section:
            return self._section[name]
        raise AttributeError(f"No option '{name}' in this section")

    def __getitem__(self, key):
        return self._section[key]

    def get(self, option, fallback=None):
        return self._section.get(option, fallback)


class ConfMod:
    def __init__(self, name, config_files=None, environ=None):
        self.__name__ = name

        default_config = {
            "DEFAULT": {
                "version": f"rpncalc {version}",
            },
            "logging": {
                "log_level": "WARNING",
            },
            "output": {
                "result_prefix": "result: ",
                "error_prefix": "error: ",
            },
        }

        # no interpolation, prefixes may contain '%'
        self.config = configparser.ConfigParser(interpolation=None)
        self.config.read_dict(default_config)

        if config_files is None:
            config_files = CONFIG_FILES
        found_files = self.config.read(config_files)
        logger.debug(f"found {len(found_files)} config files: {found_files}")

        self._load_from_env(os.environ if environ is None else environ)

    def _load_from_env(self, environ):
        """Load configuration from environment variables.

        Format: RPNCALC_SECTION_OPTION=value
        Example: RPNCALC_LOGGING_LOG_LEVEL=DEBUG sets config['logging']['log_level']
        """
        for key, value in environ.items():
            if key.startswith(ENV_PREFIX):
                parts = key[len(ENV_PREFIX) :].lower().split("_", 1)
                if len(parts) == 2:
                    section, option = parts
                    if section == "default":
                        section = "DEFAULT"
                    elif not self.config.has_section(section):
                        self.config.add_section(section)
                    self.config[section][option] = value

    def get(self, section, option, fallback=None, type_=str):
        """Get a configuration value with type conversion."""
        try:
            if type_ is bool:
                return self.config.getboolean(section, option)
            elif type_ is int:
                return self.config.getint(section, option)
            elif type_ is float:
                return self.config.getfloat(section, option)
            else:
                return self.config.get(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def __getattr__(self, name):
        # conf.output.result_prefix instead of conf.get('output', 'result_prefix')
        if name in self.config:
            return ConfigSection(self.config[name])
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def __getitem__(self, section):
        return self.config[section]

    @property
    def version(self):
        return self.get("DEFAULT", "version", "")

    @property
    def log_level(self):
        return self.get("logging", "log_level", "WARNING")

    @property
    def result_prefix(self):
        return self.get("output", "result_prefix", "result: ")

    @property
    def error_prefix(self):
        return self.get("output", "error_prefix", "error: ")
