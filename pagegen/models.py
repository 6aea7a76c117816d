"""Pydantic models for page metadata, content records and site config."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScriptRef(BaseModel):
    """Script referenced from the page shell."""

    src: str = Field(..., description="Script URL.")
    type: str = Field("module", description="Value of the script type attribute.")
    defer: bool = Field(False, description="Emit the defer attribute.")
    in_head: bool = Field(
        True,
        alias="inHead",
        description="Place in <head>; otherwise appended at the end of <body>.",
    )

    model_config = ConfigDict(populate_by_name=True)


class PageMetadata(BaseModel):
    """Values injected into the fixed document skeleton."""

    title: str = Field(..., description="Document title.")
    description: Optional[str] = Field(
        None, description="Content of the description meta tag."
    )
    lang: str = Field("en", description="Language of the html element.")
    stylesheets: List[str] = Field(
        default_factory=list, description="Stylesheet hrefs, in link order."
    )
    scripts: List[ScriptRef] = Field(
        default_factory=list, description="Scripts, in document order."
    )
    body_class: Optional[str] = Field(
        None, alias="bodyClass", description="Class attribute of the body element."
    )

    model_config = ConfigDict(populate_by_name=True)


class Link(BaseModel):
    """Labelled hyperlink."""

    label: str
    href: str
    style: Literal["primary", "secondary", "accent"] = Field(
        "secondary", description="Visual weight of the link."
    )


class Feature(BaseModel):
    """Feature entry of the landing page."""

    description: str = Field(..., description="Short feature headline.")
    icon: Optional[str] = Field(
        None, description="Trusted inline SVG markup shown next to the headline."
    )
    details: List[str] = Field(
        default_factory=list,
        description="One paragraph, or several entries shown as a list.",
    )


class LiveExample(BaseModel):
    """Section whose body is fetched from a backend endpoint after load."""

    title: str
    element_id: str = Field(..., alias="elementId")
    endpoint: str = Field(..., description="URL the client fetches on load.")
    trigger: str = Field("@get", description="Value of the data-on-load attribute.")
    loading_text: str = Field("Loading...", alias="loadingText")
    note: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class LandingContent(BaseModel):
    """Records projected into the landing page body."""

    headline: str
    tagline: Optional[str] = None
    languages: List[str] = Field(
        default_factory=list, description="Backend languages shown as badges."
    )
    languages_link: Optional[Link] = Field(None, alias="languagesLink")
    code_sample: Optional[str] = Field(
        None, alias="codeSample", description="Example markup shown verbatim."
    )
    code_sample_title: str = Field("Example", alias="codeSampleTitle")
    live_example: Optional[LiveExample] = Field(None, alias="liveExample")
    dependency_count: int = Field(0, alias="dependencyCount", ge=0)
    tree_shakeable: bool = Field(True, alias="treeShakeable")
    features: List[Feature] = Field(default_factory=list)
    built_with: List[str] = Field(default_factory=list, alias="builtWith")
    author: Optional[Link] = None
    links: List[Link] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class SiteConfig(BaseModel):
    """Top-level YAML document consumed by the CLI."""

    page: PageMetadata
    content: LandingContent
    asset: Optional[str] = Field(
        None, description="Bundle whose compressed size is shown on the page."
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "Feature",
    "LandingContent",
    "Link",
    "LiveExample",
    "PageMetadata",
    "ScriptRef",
    "SiteConfig",
]
