# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str
DescriptorId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def generate_descriptor_id() -> DescriptorId:
    return str(uuid.uuid4())
