# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

import logging

from stackref.refs import REFERENCE_PREFIX, Ref, ConfigRefs, StackRef
from stackref.stackrefconfig import is_verbose_debug_enabled

logger = logging.getLogger(__name__)

INPUTS_KEY = "inputs"
OUTPUTS_KEY = "outputs"
MEMBERS_KEY = "members"
PARENT_SEGMENT = ".."


def resolve_references(stack_ref):
    """
    Resolve every `ref:` value in the stack in a single pass.

    Stack inputs and outputs are processed first, then each member in
    declaration order. Paths are always looked up from the root stack, so a
    chain of references only resolves when the value it points at was a
    literal or was resolved earlier in the same pass. Unresolvable references
    are left with resolved=False; nothing is raised.
    """
    all_resolved = resolve_refs(stack_ref.inputs, stack_ref, stack_ref.name)
    all_resolved = resolve_refs(stack_ref.outputs, stack_ref, stack_ref.name) and all_resolved

    for member in stack_ref.members:
        resolve_config_refs(member, stack_ref)
        if not member.resolved:
            all_resolved = False

    stack_ref.resolved = all_resolved
    logger.debug("Stack %s resolved: %s", stack_ref.name, stack_ref.resolved)
    return stack_ref


def resolve_config_refs(config_refs, root):
    inputs_resolved = resolve_refs(config_refs.inputs, root, config_refs.name)
    outputs_resolved = resolve_refs(config_refs.outputs, root, config_refs.name)
    config_refs.resolved = inputs_resolved and outputs_resolved
    return config_refs.resolved


def resolve_refs(refs, root, owner):
    """ Returns True when every ref in the list ends up resolved """
    all_resolved = True
    for ref in refs:
        if ref.is_reference:
            value = get_reference_value(root, ref.raw_reference)
            if value is not None:
                ref.resolved_value = value
                ref.resolved = True
            else:
                logger.debug("%s - %s: could not resolve %s", owner, ref.name, ref.raw_reference)
        if not ref.resolved:
            all_resolved = False
    return all_resolved


def get_reference_value(root, ref_path):
    if ref_path is None:
        return None

    path = ref_path[len(REFERENCE_PREFIX):] if ref_path.startswith(REFERENCE_PREFIX) else ref_path
    verbose = is_verbose_debug_enabled()

    node = root
    for part in path.split("/"):
        # parent segments are accepted but do not move the cursor
        if part == PARENT_SEGMENT or part == "":
            continue
        node = navigate_to_part(node, part)
        if verbose:
            logger.debug("%s: segment '%s' -> %s", ref_path, part, describe_node(node))
        if node is None:
            return None

    if isinstance(node, str):
        return node
    return None


def navigate_to_part(node, part):
    if isinstance(node, StackRef):
        if part == INPUTS_KEY:
            return node.inputs
        if part == OUTPUTS_KEY:
            return node.outputs
        if part == MEMBERS_KEY:
            return node.members
        return node.get_member(part)

    if isinstance(node, ConfigRefs):
        if part == INPUTS_KEY:
            return node.inputs
        if part == OUTPUTS_KEY:
            return node.outputs
        return None

    if isinstance(node, list):
        for item in node:
            if item.name != part:
                continue
            if isinstance(item, Ref):
                return item.resolved_value
            return item

    return None


def describe_node(node):
    if isinstance(node, (StackRef, ConfigRefs)):
        return "{} '{}'".format(type(node).__name__, node.name)
    if isinstance(node, list):
        return "list of {} item(s)".format(len(node))
    return repr(node)
