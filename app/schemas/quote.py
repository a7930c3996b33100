# app/schemas/quote.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quotedoc.engine.context import DocumentMetadata, OrderData, UiFlags


class RenderQuoteRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quote_data: OrderData = Field(default_factory=OrderData)
    ui: UiFlags = Field(default_factory=UiFlags)
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)


class TemplateStatus(BaseModel):
    templates_loaded: bool
