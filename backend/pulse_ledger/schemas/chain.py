"""Chain Schemas: Pydantic models for ledger request and response bodies.

Invariants:
    - AppendRequest.payload is a strict int: no coercion from str, float or bool
    - "payload" is the canonical field; "bpm" and "BPM" are accepted aliases
    - BlockResponse mirrors the five Block wire fields exactly

Design Decisions:
    - StrictInt so a partially decoded value never reaches the core
    - AliasChoices keeps heart-rate clients that send "bpm" working
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt

from pulse_ledger.core.block import Block


class AppendRequest(BaseModel):
    """Body of POST /api/v1/chain."""
    model_config = ConfigDict(extra="ignore")

    payload: StrictInt = Field(
        validation_alias=AliasChoices("payload", "bpm", "BPM"),
    )


class BlockResponse(BaseModel):
    """Public shape of one block."""
    index: int = Field(ge=0)
    timestamp: str
    payload: int
    hash: str
    prev_hash: str

    @classmethod
    def from_block(cls, block: Block) -> "BlockResponse":
        return cls.model_validate(block.to_dict())


class VerifyResponse(BaseModel):
    """Result of a full-chain audit."""
    valid: bool
    length: int
    first_invalid_index: int | None = None
