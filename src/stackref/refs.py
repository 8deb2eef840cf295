# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

REFERENCE_PREFIX = "ref:"


class Ref:
    """
    A named input or output value. Either a literal (resolved on creation) or a
    `ref:` pointer to another value in the same stack.
    """

    def __init__(self, name, raw_reference=None, resolved_value=None, is_reference=None, resolved=None):
        self.name = name
        self.raw_reference = raw_reference
        self.resolved_value = resolved_value
        # derived from the other fields unless given explicitly
        self.is_reference = raw_reference is not None if is_reference is None else is_reference
        self.resolved = (resolved_value is not None and not self.is_reference) if resolved is None else resolved

    def _fields(self):
        return self.name, self.raw_reference, self.resolved_value, self.is_reference, self.resolved

    def __eq__(self, other):
        if not isinstance(other, Ref):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None

    def __repr__(self):
        return "Ref(name={!r}, raw_reference={!r}, resolved_value={!r}, is_reference={!r}, resolved={!r})".format(
            *self._fields())


class ConfigRefs:
    """Inputs and outputs of a single stack member."""

    def __init__(self, name, id=None, inputs=None, outputs=None, resolved=False):
        self.name = name
        self.id = id
        self.inputs = list(inputs) if inputs else []
        self.outputs = list(outputs) if outputs else []
        self.resolved = resolved

    def all_refs(self):
        return self.inputs + self.outputs

    def __eq__(self, other):
        if not isinstance(other, ConfigRefs):
            return NotImplemented
        return (self.name, self.id, self.inputs, self.outputs, self.resolved) == \
            (other.name, other.id, other.inputs, other.outputs, other.resolved)

    __hash__ = None

    def __repr__(self):
        return "ConfigRefs(name={!r}, id={!r}, inputs={!r}, outputs={!r}, resolved={!r})".format(
            self.name, self.id, self.inputs, self.outputs, self.resolved)


class StackRef:
    """
    Root of a reference graph: the stack's own inputs and outputs plus its members.
    The resolver mutates the graph in place, so a single StackRef must not be
    resolved from several threads at once.
    """

    def __init__(self, name, id=None, inputs=None, outputs=None, members=None, resolved=False):
        self.name = name
        self.id = id
        self.inputs = list(inputs) if inputs else []
        self.outputs = list(outputs) if outputs else []
        self.members = list(members) if members else []
        self.resolved = resolved

    def get_member(self, name):
        for member in self.members:
            if member.name == name:
                return member
        return None

    def __eq__(self, other):
        if not isinstance(other, StackRef):
            return NotImplemented
        return (self.name, self.id, self.inputs, self.outputs, self.members, self.resolved) == \
            (other.name, other.id, other.inputs, other.outputs, other.members, other.resolved)

    __hash__ = None

    def __repr__(self):
        return "StackRef(name={!r}, id={!r}, inputs={!r}, outputs={!r}, members={!r}, resolved={!r})".format(
            self.name, self.id, self.inputs, self.outputs, self.members, self.resolved)
