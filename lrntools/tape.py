#  Copyright (c) 2026, Apple Inc. All rights reserved.
#
#  Use of this source code is governed by a BSD-3-clause license that can be
#  found in the LICENSE.txt file or at https://opensource.org/licenses/BSD-3-Clause

from typing import Any, Dict, Iterator, List

import numpy as np
from attrs import define, field


@define(frozen=True, eq=False)
class OpRecord:
    """
    A single executed operation: its type, named inputs, attributes and output.
    """
    op_type: str
    inputs: Dict[str, np.ndarray]
    attributes: Dict[str, Any]
    output: np.ndarray

    def __repr__(self):
        inputs = ", ".join(f"{k}={tuple(v.shape)}" for k, v in self.inputs.items())
        return f"OpRecord({self.op_type}: [{inputs}] -> {tuple(self.output.shape)}, {self.attributes})"


@define
class OperationTape:
    """
    Caller-owned, ordered record of operations.

    Nothing is recorded globally: an op appends to a tape only when the tape is passed to
    it explicitly, for instance

    .. sourcecode:: python

        tape = lrntools.OperationTape()
        y = lrntools.local_response_normalization(x, radius=2, tape=tape)
        assert tape[-1].op_type == "local_response_normalization"
    """
    records: List[OpRecord] = field(factory=list)

    def record(self, op_type: str, inputs: Dict[str, np.ndarray], attributes: Dict[str, Any], output: np.ndarray) -> OpRecord:
        op_record = OpRecord(op_type=op_type, inputs=dict(inputs), attributes=dict(attributes), output=output)
        self.records.append(op_record)
        return op_record

    def clear(self):
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[OpRecord]:
        return iter(self.records)

    def __getitem__(self, idx) -> OpRecord:
        return self.records[idx]
