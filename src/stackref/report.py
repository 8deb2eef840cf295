# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

INPUT_LABEL = "Input"
OUTPUT_LABEL = "Output"


def iter_owned_refs(stack_ref):
    """ Yields (owner name, label, ref): stack inputs, stack outputs, then each member's inputs and outputs """
    for ref in stack_ref.inputs:
        yield stack_ref.name, INPUT_LABEL, ref
    for ref in stack_ref.outputs:
        yield stack_ref.name, OUTPUT_LABEL, ref
    for member in stack_ref.members:
        for ref in member.inputs:
            yield member.name, INPUT_LABEL, ref
        for ref in member.outputs:
            yield member.name, OUTPUT_LABEL, ref


def get_all_refs(stack_ref):
    return [ref for _, _, ref in iter_owned_refs(stack_ref)]


def is_unresolved_reference(ref):
    return not ref.resolved and ref.raw_reference is not None


def get_all_unresolved_refs(stack_ref):
    return [ref for ref in get_all_refs(stack_ref) if is_unresolved_reference(ref)]


def get_all_refs_as_string(stack_ref):
    lines = []
    for owner, label, ref in iter_owned_refs(stack_ref):
        if ref.raw_reference is None:
            continue
        if ref.resolved_value is not None:
            lines.append("{} - {}({}): {} Value: {}\n".format(owner, ref.name, label, ref.raw_reference,
                                                              ref.resolved_value))
        else:
            lines.append("{} - {}({}): {} (Unresolved)\n".format(owner, ref.name, label, ref.raw_reference))
    return "".join(lines)


def get_all_unresolved_refs_as_string(stack_ref):
    lines = []
    for owner, label, ref in iter_owned_refs(stack_ref):
        if is_unresolved_reference(ref):
            lines.append("{} - {}({}): {}\n".format(owner, ref.name, label, ref.raw_reference))
    return "".join(lines)


def print_all_refs(stack_ref):
    print(get_all_refs_as_string(stack_ref), end="")


def print_unresolved_refs(stack_ref):
    print(get_all_unresolved_refs_as_string(stack_ref), end="")
