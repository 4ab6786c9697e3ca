"""Configuration models for Mustalah."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitHubSourceConfig(BaseModel):
    """Location of the published glossary on GitHub."""

    model_config = ConfigDict(extra="forbid")

    owner: str = Field("mstlah", min_length=1)
    repo: str = Field("mstlah", min_length=1)
    branch: str = Field("dummy", min_length=1)
    api_path: str = Field(
        "dictionary/api/v1",
        description="Directory holding categories.json and <category>/index.json",
    )
    terms_path: str = Field(
        "dictionary/terms",
        description="Directory holding <category>/<slug>.md term files",
    )
    timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")

    @field_validator("api_path", "terms_path")
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        """Store repository paths without leading or trailing slashes."""
        return v.strip("/")


class GlossaryConfig(BaseModel):
    """Settings for index generation, validation and repository access.

    Attributes:
        data_dir: Root directory containing category subdirectories
        index_filename: Name of the per-category index artifact
        categories_filename: Name of the root index artifact
        meta_filename: Name of the optional per-category metadata file
        verbose: Enable debug logging
        github: Remote repository location
    """

    model_config = ConfigDict(extra="forbid")

    data_dir: str = Field("./data", min_length=1)
    index_filename: str = Field("index.json", min_length=1)
    categories_filename: str = Field("categories.json", min_length=1)
    meta_filename: str = Field("meta.json", min_length=1)
    verbose: bool = False
    github: GitHubSourceConfig = Field(default_factory=GitHubSourceConfig)
