import logging
import pathlib
from configparser import Error as ParserError
from configparser import NoOptionError, NoSectionError, RawConfigParser
from io import StringIO
from os import getenv
from os.path import exists as path_exists
from os.path import join as path_join

from shapemock.log import configure_logging, logger

DEFAULTS = {
    "mock_verbose": False,
    "mock_log_level": "WARNING",
    "recorder_record_kwargs": True,
}


class ConfigError(Exception):
    pass


def create_filename(name=None, configdir=None):
    """Create a filename from the given name and configdir."""
    if name is None and configdir is None:
        explicit = getenv("SHAPEMOCK_CONFIG")
        if explicit:
            return explicit
    if name is None:
        name = "shapemock.conf"
    if configdir is None:
        configdir = getenv("XDG_CONFIG_HOME")
        if not configdir:
            homedir = getenv("HOME")
            if not homedir:
                raise ConfigError(
                    "Unable to retrieve user home directory: empty HOME environment variable"
                )
            configdir = path_join(homedir, ".config")
    return path_join(configdir, name)


class ShapeMockConfig:
    def __init__(self, filename=None, configdir=None, read=False, use_file=True):
        self._parser = RawConfigParser()
        self.filename = None
        if use_file:
            self.filename = create_filename(filename, configdir)
        if read and self.filename is not None and path_exists(self.filename):
            try:
                self._parser.read([self.filename])
            except (ParserError, UnicodeDecodeError) as err:
                raise ConfigError(
                    "Unable to parse configuration file %s: %s" % (self.filename, err)
                )

        # Mock options
        self.mock_verbose = self.getbool("mock", "verbose", DEFAULTS["mock_verbose"])
        self.mock_log_level = self.getstr(
            "mock", "log_level", DEFAULTS["mock_log_level"]
        ).upper()
        self.log_level_number()

        # Recorder options
        self.recorder_record_kwargs = self.getbool(
            "recorder", "record_kwargs", DEFAULTS["recorder_record_kwargs"]
        )

    def log_level_number(self):
        level = logging.getLevelName(self.mock_log_level)
        if not isinstance(level, int):
            raise ConfigError(
                "Value log_level of section mock is not a logging level: %s"
                % self.mock_log_level
            )
        return level

    def write_sample_config(self, write_file=True):
        """Create a sample configuration file and optionally write it."""
        output = StringIO()
        parser = RawConfigParser()
        if write_file:
            if self.filename is None:
                raise ConfigError("No configuration file name to write to")
            config_file = pathlib.Path(self.filename)
            if config_file.exists():
                raise ConfigError(
                    "Configuration file already exists: %s" % self.filename
                )

        output.write("""# shapemock default configuration file\n\n""")
        for section_and_key, value in DEFAULTS.items():
            section, key = section_and_key.split("_", maxsplit=1)
            if section not in parser:
                parser.add_section(section)
            parser.set(section, key, str(value).lower())
        parser.write(output)

        if write_file:
            with config_file.open("w") as file:
                file.write(output.getvalue())
        return output

    def _gettype(self, func, type_name, section, key, default_value):
        try:
            value = func(section, key)
            if func == self._parser.get:
                value = value.strip()
            return value
        except (NoSectionError, NoOptionError):
            return default_value
        except ValueError as err:
            raise ConfigError(
                "Value %s of section %s is not %s! %s" % (key, section, type_name, err)
            )

    def getstr(self, section, key, default_value=None):
        return self._gettype(self._parser.get, "a string", section, key, default_value)

    def getbool(self, section, key, default_value):
        return self._gettype(
            self._parser.getboolean, "a boolean", section, key, default_value
        )


# Global singleton
_config: ShapeMockConfig | None = None


def get_config() -> ShapeMockConfig:
    """
    Get the global ShapeMockConfig, reading the configuration file on first use.

    A missing home directory or an invalid file is logged as a warning and the
    defaults are used, so mock setup never fails on configuration.
    """
    global _config
    if _config is None:
        try:
            _config = ShapeMockConfig(read=True)
        except ConfigError as err:
            logger.warning("Using default configuration: %s", err)
            _config = ShapeMockConfig(use_file=False)
        configure_logging(_config)
    return _config


def set_config(config: ShapeMockConfig) -> ShapeMockConfig:
    """Replace the global ShapeMockConfig and apply its logging options."""
    global _config
    _config = config
    configure_logging(config)
    return config


def reset_config():
    """Reset the global ShapeMockConfig (mainly for testing)."""
    global _config
    _config = None
