# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

__version__ = "0.1.0"

from stackref.refs import Ref, ConfigRefs, StackRef  # noqa: E402
from stackref.builder import (  # noqa: E402
    classify,
    build_input_refs,
    build_output_refs,
    build_config_refs,
    build_members,
    build_stack_ref,
)
from stackref.resolver import resolve_references  # noqa: E402
from stackref.report import (  # noqa: E402
    get_all_refs,
    get_all_unresolved_refs,
    get_all_refs_as_string,
    get_all_unresolved_refs_as_string,
    print_all_refs,
    print_unresolved_refs,
)

__all__ = [
    'Ref',
    'ConfigRefs',
    'StackRef',
    'classify',
    'build_input_refs',
    'build_output_refs',
    'build_config_refs',
    'build_members',
    'build_stack_ref',
    'resolve_references',
    'get_all_refs',
    'get_all_unresolved_refs',
    'get_all_refs_as_string',
    'get_all_unresolved_refs_as_string',
    'print_all_refs',
    'print_unresolved_refs',
]
