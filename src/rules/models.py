from pydantic import BaseModel, ConfigDict, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class MediaRules(BaseModel):
    image_extensions: list[str] = Field(default_factory=lambda: ["jpg", "jpeg", "png"])
    video_extensions: list[str] = Field(
        default_factory=lambda: ["mp4", "mkv", "rmvb", "avi", "mov", "rm", "wmv"]
    )
    case_insensitive_extensions: bool = False
    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])
    # extension -> MIME type, consulted before the system table
    mime_overrides: dict[str, str] = Field(default_factory=dict)


class HtmlRules(BaseModel):
    # "herf" is the historical spelling stored in existing exports.
    link_attribute: str = "herf"
    line_break: str = "<br>"


class PlainTextRules(BaseModel):
    media_open: str = "!["
    media_close: str = "]!"
    mention_prefix: str = "@"


class Rules(BaseModel):
    project: ProjectRules
    media: MediaRules = Field(default_factory=MediaRules)
    html: HtmlRules = Field(default_factory=HtmlRules)
    plaintext: PlainTextRules = Field(default_factory=PlainTextRules)

    model_config = ConfigDict(extra="forbid")
