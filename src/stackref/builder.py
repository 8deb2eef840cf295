# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

import logging
from collections import namedtuple

from stackref.refs import REFERENCE_PREFIX, Ref, ConfigRefs, StackRef
from stackref.report import get_all_unresolved_refs
from stackref.stackrefconfig import get_value_or

logger = logging.getLogger(__name__)

KIND_ABSENT = "absent"
KIND_STRING = "string"
KIND_LIST = "list"
KIND_UNSUPPORTED = "unsupported"

Classification = namedtuple("Classification", ["raw_reference", "resolved_value", "resolved", "is_reference"])

UNCLASSIFIED = Classification(None, None, False, False)


def is_reference(value):
    return value.startswith(REFERENCE_PREFIX)


def value_kind(value):
    if value is None:
        return KIND_ABSENT
    if isinstance(value, str):
        return KIND_STRING
    if isinstance(value, (list, tuple)):
        return KIND_LIST
    return KIND_UNSUPPORTED


def format_list_element(element):
    # booleans render lowercase, nulls as <nil>
    if element is None:
        return "<nil>"
    if isinstance(element, bool):
        return "true" if element else "false"
    return element


def convert_list_to_string(values):
    """
    Render a list the way it is shown in stack definitions:
    ["a", "b"] with nested lists rendered recursively and [] for an empty list.
    """
    if not values:
        return "[]"
    elements = []
    for element in values:
        if isinstance(element, (list, tuple)):
            elements.append(convert_list_to_string(element))
        else:
            elements.append('"{}"'.format(format_list_element(element)))
    return "[{}]".format(", ".join(elements))


def classify(value, name=None):
    """
    Classify a raw input/output value.

    Returns (raw_reference, resolved_value, resolved, is_reference). Strings
    starting with `ref:` are references, other strings and rendered lists are
    literals. None and unsupported types (numbers, booleans, maps) yield an
    unresolved non-reference; unsupported types are reported with a warning.
    """
    kind = value_kind(value)
    if kind == KIND_ABSENT:
        return UNCLASSIFIED
    if kind == KIND_UNSUPPORTED:
        logger.warning("Unsupported value type '%s' for '%s', value left unresolved",
                       type(value).__name__, name)
        return UNCLASSIFIED

    value_str = convert_list_to_string(value) if kind == KIND_LIST else value

    if is_reference(value_str):
        return Classification(value_str, None, False, True)
    return Classification(None, value_str, True, False)


def build_input_refs(inputs):
    """ Ordering follows the mapping and is not part of the contract """
    refs = []
    if not inputs:
        return refs
    for input_name, input_value in inputs.items():
        raw_reference, resolved_value, resolved, is_ref = classify(input_value, input_name)
        refs.append(Ref(
            name=input_name,
            raw_reference=raw_reference,
            resolved_value=resolved_value,
            is_reference=is_ref,
            resolved=resolved,
        ))
    return refs


def build_output_refs(outputs):
    refs = []
    if not outputs:
        return refs
    for output in outputs:
        output_name = output.get("name")
        if output_name is None:
            raise ValueError("Output declaration without a name: {}".format(output))
        raw_reference, resolved_value, resolved, is_ref = classify(output.get("value"), output_name)
        # a non-reference output is self-contained once it carries a value
        if not is_ref and resolved_value is not None:
            resolved = True
        refs.append(Ref(
            name=output_name,
            raw_reference=raw_reference,
            resolved_value=resolved_value,
            is_reference=is_ref,
            resolved=resolved,
        ))
    return refs


def all_resolved(refs):
    return all(ref.resolved for ref in refs)


def build_config_refs(member):
    member_name = get_value_or(member, "definition/name")
    member_id = member.get("id")
    if member_name is None or member_id is None:
        raise ValueError("Stack member is missing 'id' or 'definition/name': {}".format(member))

    inputs = build_input_refs(get_value_or(member, "definition/inputs"))
    outputs = build_output_refs(member.get("outputs"))

    return ConfigRefs(
        name=member_name,
        id=member_id,
        inputs=inputs,
        outputs=outputs,
        resolved=all_resolved(inputs) and all_resolved(outputs),
    )


def build_members(members):
    return [build_config_refs(member) for member in members or []]


def stack_inputs_to_map(inputs):
    inputs_map = dict()
    for stack_input in inputs or []:
        input_name = stack_input.get("name")
        if input_name is None:
            raise ValueError("Stack input declaration without a name: {}".format(stack_input))
        inputs_map[input_name] = stack_input.get("default")
    return inputs_map


def build_stack_ref(stack_definition, members=None):
    """
    Build the reference graph for a stack definition and its member configs.

    The stack definition follows the projects API layout: `id`,
    `configuration/definition/name` and `stack_definition/inputs|outputs`.
    Members carry `id`, `definition/name`, `definition/inputs` and `outputs`.
    Raises ValueError when a required field is missing.
    """
    if not isinstance(stack_definition, dict):
        raise ValueError("Stack definition must be a mapping, got {}".format(type(stack_definition).__name__))

    stack_id = stack_definition.get("id")
    if stack_id is None:
        raise ValueError("Stack definition is missing 'id'")
    if stack_definition.get("configuration") is None:
        raise ValueError("Stack definition {} is missing 'configuration'".format(stack_id))
    stack_name = get_value_or(stack_definition, "configuration/definition/name")
    if stack_name is None:
        raise ValueError("Stack definition {} is missing 'configuration/definition/name'".format(stack_id))

    member_refs = build_members(members)
    inputs = build_input_refs(stack_inputs_to_map(get_value_or(stack_definition, "stack_definition/inputs")))
    outputs = build_output_refs(get_value_or(stack_definition, "stack_definition/outputs"))

    stack_ref = StackRef(
        name=stack_name,
        id=stack_id,
        inputs=inputs,
        outputs=outputs,
        members=member_refs,
    )
    stack_ref.resolved = len(get_all_unresolved_refs(stack_ref)) == 0

    logger.debug("Built stack ref %s (%s) with %d member(s), resolved: %s",
                 stack_name, stack_id, len(member_refs), stack_ref.resolved)
    return stack_ref
