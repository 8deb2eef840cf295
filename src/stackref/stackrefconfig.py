# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

import os
import yaml
import logging
import fastjsonschema

from functools import reduce
from packaging.version import Version
from stackref import __version__

logger = logging.getLogger(__name__)

CONFIG_SCHEMA_PATH = "data/config_schema.json"

# Set to "true" to trace every path segment the resolver walks.
VERBOSE_DEBUG_ENV = "STACKREF_VERBOSE_DEBUG"

DEFAULT_FIXTURES_DIR = "fixtures"


def get_value_or(dictionary, x_path, default=None):
    """
    Try to retrieve a value from a dictionary. Return the default if no such value is found.
    """
    keys = x_path.split("/")
    return reduce(
        lambda d, key: d.get(key, default)
        if isinstance(d, dict) else default, keys, dictionary)


def is_verbose_debug_enabled():
    return os.environ.get(VERBOSE_DEBUG_ENV, "").strip().lower() == "true"


class StackRefConfig():
    """
    Parses all the available configuration files in order and merges them together.
    """

    DEFAULT_PATHS = [
        '/etc/stackref/.stackrefconfig.yaml',
        os.path.expanduser('~/.stackrefconfig.yaml'),
        os.path.join(os.getcwd(), '.stackrefconfig.yaml')
    ]

    def __init__(self, package_dir=None, paths=None):
        self.config = dict()
        self.package_dir = package_dir or os.path.dirname(__file__)
        self.validate = fastjsonschema.compile(self.read_schema())

        paths = list(paths) if paths is not None else self.DEFAULT_PATHS[:]

        parsed_files = []
        logger.debug("parsing %s", paths)

        for config_path in paths:
            config_path = os.path.realpath(os.path.expanduser(config_path))
            if not os.path.isfile(config_path):
                continue

            logger.info("parsing %s", config_path)
            with open(config_path) as f:
                try:
                    config = yaml.safe_load(f.read())
                except yaml.YAMLError:
                    logger.error("Failed to parse configuration file: %s", config_path)
                    raise

            if not isinstance(config, dict):
                logger.error("cannot parse yaml dict from file: %s", config_path)
                continue

            try:
                self.validate(config)
            except fastjsonschema.JsonSchemaException:
                logger.error("Schema validation failed for configuration file: %s", config_path)
                raise

            parsed_files.append(config_path)
            self.config.update(config)

        self.parsed_files = parsed_files
        logger.info("final stackref config: %s from %s", self.config, parsed_files)

    def get(self, item, default=None):
        return self.config.get(item, default)

    def validate_version(self):
        min_version = get_value_or(self.config, "min_version")

        if not min_version:
            return

        if Version(__version__) < Version(min_version):
            raise ValueError(
                "The current stackref version '{}' is lower than the minimum required version '{}'".format(
                    __version__, min_version,
                )
            )

    def read_schema(self):
        with open(os.path.join(self.package_dir, CONFIG_SCHEMA_PATH), "r") as f:
            return yaml.safe_load(f.read())

    def __contains__(self, item):
        return item in self.config

    def __getitem__(self, item):
        if item not in self.config:
            raise KeyError("%s not found in %s" % (item, self.parsed_files))

        return self.config[item]

    def all(self):
        return self.config

    def verbose_debug(self):
        # the environment wins over the config files
        if VERBOSE_DEBUG_ENV in os.environ:
            return is_verbose_debug_enabled()
        return bool(get_value_or(self.config, "verbose_debug", False))

    def debug_backend(self):
        if self.verbose_debug() and not is_verbose_debug_enabled():
            os.environ[VERBOSE_DEBUG_ENV] = "true"
            logger.info("Verbose reference resolver debugging enabled")

    def logging_verbosity(self):
        return get_value_or(self.config, "logging/verbose", 0)

    def fixtures_dir(self):
        return os.path.expanduser(get_value_or(self.config, "fixtures/dir", DEFAULT_FIXTURES_DIR))
