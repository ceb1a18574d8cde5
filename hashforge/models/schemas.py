from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class StepFamily(str, Enum):
    """Groups of hash steps, by what they do to the accumulator."""

    STRING_FOLD = "string_fold"
    MULTIPLICATIVE = "multiplicative"
    DIFFUSION = "diffusion"
    ENCODING = "encoding"


class StepType(str, Enum):
    """Step ids of the closed catalog, in display order."""

    CHARCODE_SUM = "charcode_sum"
    POLYNOMIAL_ROLL = "polynomial_roll"
    XOR_FOLD = "xor_fold"
    MODULAR_EXP = "modular_exp"
    FIBONACCI_MIX = "fibonacci_mix"
    PRIME_MULTIPLY = "prime_multiply"
    BIT_ROTATE = "bit_rotate"
    ASCII_SQUARE = "ascii_square"
    AVALANCHE = "avalanche"
    SALT_INJECT = "salt_inject"
    ROUNDS = "rounds"
    HEX_ENCODE = "hex_encode"
    MODULO_TRIM = "modulo_trim"


# ============================================================================
# Catalog Schemas
# ============================================================================


class StepInfo(BaseModel):
    """Display metadata for one catalog step."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: StepType
    family: StepFamily
    label: str
    icon: str
    description: str
    formula: str


class StepCatalogResponse(BaseModel):
    """Response schema for /steps endpoint."""

    steps: list[StepInfo]


# ============================================================================
# Request Schemas
# ============================================================================


class HashRequest(BaseModel):
    """Request schema for /hash and /avalanche endpoints."""

    password: str = ""
    salt: str = ""
    pipeline: list[str] = Field(default_factory=list)
    name: str = Field(default="Custom", max_length=100)


class StrengthRequest(BaseModel):
    """Request schema for /strength endpoint."""

    password: str = ""


# ============================================================================
# Response Schemas
# ============================================================================


class TraceEntrySchema(BaseModel):
    """One executed step of a pipeline run."""

    model_config = ConfigDict(from_attributes=True)

    step_label: str
    description: str
    value: int = Field(ge=0, le=0xFFFFFFFF)
    display: str | None = None


class HashResponse(BaseModel):
    """Response schema for /hash endpoint."""

    final_hash: str
    bit_length: int
    step_count: int
    summary: str
    trace: list[TraceEntrySchema]
    step_values: list[int]
    final_accumulator: int


class AvalancheRowSchema(BaseModel):
    """One row of an avalanche comparison."""

    model_config = ConfigDict(from_attributes=True)

    label: str
    hash: str
    diff_percent: int = Field(ge=0, le=100)


class AvalancheResponse(BaseModel):
    """Response schema for /avalanche endpoint."""

    base_hash: str
    rows: list[AvalancheRowSchema]


class PresetInfo(BaseModel):
    """A named, ready-made pipeline."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    pipeline: list[str]


class ScenarioInfo(BaseModel):
    """A breach-story demo: a pipeline plus suggested inputs."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    title: str
    pipeline: list[str]
    password: str | None = None
    salt: str | None = None


class PresetsResponse(BaseModel):
    """Response schema for /presets endpoint."""

    presets: list[PresetInfo]
    scenarios: list[ScenarioInfo]


class StrengthResponse(BaseModel):
    """Response schema for /strength endpoint."""

    model_config = ConfigDict(from_attributes=True)

    length: int
    pool_size: int
    entropy_bits: int
    score: int
    label: str | None = None
    percent: int = Field(ge=0, le=100)
    tips: list[str] = Field(default_factory=list)
    crack_time: str | None = None


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
