# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

"""
Stack fixtures: a YAML (or JSON) document holding a `stack` definition and its
`members`, laid out the same way the projects API returns them.
"""

import logging
import os

import fastjsonschema
import yaml

from stackref.builder import build_stack_ref
from stackref.stackrefconfig import get_value_or

logger = logging.getLogger(__name__)

STACK_SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "data", "stack_schema.json")

_validate_stack = None


def stack_validator():
    global _validate_stack
    if _validate_stack is None:
        with open(STACK_SCHEMA_PATH, "r") as f:
            _validate_stack = fastjsonschema.compile(yaml.safe_load(f.read()))
    return _validate_stack


def fixture_path(path, fixtures_dir=None):
    """ Relative paths are looked up in fixtures_dir when one is given """
    path = os.path.expanduser(path)
    if fixtures_dir and not os.path.isabs(path):
        path = os.path.join(os.path.expanduser(fixtures_dir), path)
    return os.path.realpath(path)


def read_stack_config(path, fixtures_dir=None):
    path = fixture_path(path, fixtures_dir)
    logger.info("reading stack fixture %s", path)
    try:
        with open(path) as f:
            document = yaml.safe_load(f.read())
    except OSError:
        logger.error("Error reading stack fixture: %s", path)
        raise
    except yaml.YAMLError:
        logger.error("Failed to parse stack fixture: %s", path)
        raise

    if not isinstance(document, dict):
        raise ValueError("Stack fixture {} does not contain a mapping".format(path))

    try:
        stack_validator()(document)
    except fastjsonschema.JsonSchemaException:
        logger.error("Schema validation failed for stack fixture: %s", path)
        raise

    return document


def check_stack_for_duplicates(stack_definition, members=None):
    """ Returns one message per duplicated stack input/output or member output name """
    error_messages = []

    input_names = set()
    for stack_input in get_value_or(stack_definition, "stack_definition/inputs") or []:
        name = stack_input.get("name")
        if name in input_names:
            error_messages.append("duplicate stack input variable found: {}".format(name))
        input_names.add(name)

    output_names = set()
    for stack_output in get_value_or(stack_definition, "stack_definition/outputs") or []:
        name = stack_output.get("name")
        if name in output_names:
            error_messages.append("duplicate stack output variable found: {}".format(name))
        output_names.add(name)

    # member inputs are a mapping, so only outputs can repeat a name
    for member in members or []:
        member_name = get_value_or(member, "definition/name")
        member_output_names = set()
        for member_output in member.get("outputs") or []:
            name = member_output.get("name")
            if name in member_output_names:
                error_messages.append(
                    "duplicate member output variable found member: {} output: {}".format(member_name, name))
            member_output_names.add(name)

    return error_messages


def load_stack_fixture(path, fixtures_dir=None):
    document = read_stack_config(path, fixtures_dir)
    stack_definition = document["stack"]
    members = document.get("members") or []

    error_messages = check_stack_for_duplicates(stack_definition, members)
    if error_messages:
        raise ValueError("\n".join(error_messages))

    return stack_definition, members


def load_stack_ref(path, fixtures_dir=None):
    stack_definition, members = load_stack_fixture(path, fixtures_dir)
    return build_stack_ref(stack_definition, members)
