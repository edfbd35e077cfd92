from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field


# Sent as generationConfig.responseSchema. Gemini treats these as generation
# hints; replies are still validated against the models below.
FACT_SCHEMA = {
	"type": "OBJECT",
	"properties": {
		"facts": {
			"type": "ARRAY",
			"description": "An array of at least 5 interesting and verifiable facts about the topic.",
			"items": {"type": "STRING"},
		},
		"related_topics": {
			"type": "ARRAY",
			"description": "An array of 3 to 5 related topics for further exploration.",
			"items": {"type": "STRING"},
		},
	},
	"required": ["facts", "related_topics"],
}

EXAM_INFO_SCHEMA = {
	"type": "OBJECT",
	"properties": {
		"description": {
			"type": "STRING",
			"description": "A brief, informative description of the exam.",
		},
		"apply_start_date": {
			"type": "STRING",
			"description": "The start date for applications. State if it's tentative or past.",
		},
		"apply_end_date": {
			"type": "STRING",
			"description": "The end date for applications. State if it's tentative or past.",
		},
		"exam_pattern": {
			"type": "STRING",
			"description": "A detailed breakdown of the exam pattern, including stages, subjects, marks, and duration. Use newlines for formatting.",
		},
		"syllabus": {
			"type": "STRING",
			"description": "A comprehensive overview of the syllabus for all subjects/stages. Use newlines for formatting.",
		},
	},
	"required": ["description", "apply_start_date", "apply_end_date", "exam_pattern", "syllabus"],
}


class FactResult(BaseModel):
	facts: List[str] = Field(description="At least 5 facts requested, not enforced")
	related_topics: List[str] = Field(description="3 to 5 topics requested, not enforced")


class ExamInfoResult(BaseModel):
	description: str
	apply_start_date: str
	apply_end_date: str
	exam_pattern: str
	syllabus: str


class TopicRequest(BaseModel):
	topic: str = ""


class TextRequest(BaseModel):
	text: str = ""
	file_name: str | None = None


class ExamRequest(BaseModel):
	exam_name: str = ""


class CurrentAffairsResponse(BaseModel):
	items: List[str]


class SummaryResponse(BaseModel):
	summary: str


class FactOfTheDayResponse(BaseModel):
	fact: str
