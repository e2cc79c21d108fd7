"""
목적: 웹 검색 결과와 공급자 응답 스키마를 정의한다.
설명: 호출자에게 돌려주는 `SearchResult`와 Google Custom Search 응답 검증용 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO) + 경계 스키마 검증
참조: src/genie_chat/core/search/service.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """검색 결과 1건. 오류/상태 안내용 합성 결과도 같은 형태를 사용한다."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    snippet: str


class SearchTrigger(BaseModel):
    """`/web ` 접두어에서 추출한 검색 질의."""

    model_config = ConfigDict(frozen=True)

    query: str


class ProviderSearchItem(BaseModel):
    """공급자 응답 `items[]` 원소."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    link: str
    snippet: str | None = None
    html_snippet: str | None = Field(default=None, alias="htmlSnippet")
    display_link: str | None = Field(default=None, alias="displayLink")
    formatted_url: str | None = Field(default=None, alias="formattedUrl")


class ProviderSearchInformation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_results: str | None = Field(default=None, alias="totalResults")
    formatted_search_time: str | None = Field(default=None, alias="formattedSearchTime")


class ProviderError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    message: str | None = None


class ProviderSearchResponse(BaseModel):
    """공급자 성공 응답 본문 스키마."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: list[ProviderSearchItem] | None = None
    search_information: ProviderSearchInformation | None = Field(default=None, alias="searchInformation")
    error: ProviderError | None = None
