from __future__ import annotations
import enum
from typing import Dict, List


class Language(str, enum.Enum):
	EN = "en"
	HI = "hi"


# Name used inside prompts to tell the model which language to answer in
PROMPT_LANGUAGE: Dict[Language, str] = {
	Language.EN: "English",
	Language.HI: "Hindi",
}


TRANSLATIONS: Dict[Language, Dict[str, str]] = {
	Language.EN: {
		"errorEnterTopic": "Please enter a topic to generate facts.",
		"errorNoFile": "Please select a file to summarize.",
		"errorEmptyFile": "The selected file is empty.",
		"errorReadFile": "Failed to read the file.",
		"errorExamName": "Please enter an exam name.",
		"factsAbout": "Facts about",
		"relatedTopics": "Related Topics",
		"summaryHeader": "Summary",
		"currentAffairsHeader": "Today's Current Affairs Briefing",
		"examInfoHeader": "Exam Information",
		"examDescription": "Description",
		"examDates": "Important Dates",
		"examApplyStart": "Application Start",
		"examApplyEnd": "Application End",
		"examPattern": "Exam Pattern",
		"examSyllabus": "Syllabus",
	},
	Language.HI: {
		"errorEnterTopic": "तथ्य बनाने के लिए कृपया एक विषय दर्ज करें।",
		"errorNoFile": "सारांश के लिए कृपया एक फ़ाइल चुनें।",
		"errorEmptyFile": "चुनी गई फ़ाइल खाली है।",
		"errorReadFile": "फ़ाइल पढ़ने में विफल।",
		"errorExamName": "कृपया परीक्षा का नाम दर्ज करें।",
		"factsAbout": "इसके बारे में तथ्य",
		"relatedTopics": "संबंधित विषय",
		"summaryHeader": "सारांश",
		"currentAffairsHeader": "आज की समसामयिकी",
		"examInfoHeader": "परीक्षा जानकारी",
		"examDescription": "विवरण",
		"examDates": "महत्वपूर्ण तिथियाँ",
		"examApplyStart": "आवेदन प्रारंभ",
		"examApplyEnd": "आवेदन समाप्त",
		"examPattern": "परीक्षा पैटर्न",
		"examSyllabus": "पाठ्यक्रम",
	},
}


PREDEFINED_TOPICS: Dict[Language, List[str]] = {
	Language.EN: [
		"Black Holes",
		"Indian Constitution",
		"Photosynthesis",
		"The Mughal Empire",
		"Artificial Intelligence",
		"Climate Change",
	],
	Language.HI: [
		"ब्लैक होल",
		"भारतीय संविधान",
		"प्रकाश संश्लेषण",
		"मुगल साम्राज्य",
		"कृत्रिम बुद्धिमत्ता",
		"जलवायु परिवर्तन",
	],
}


def text(language: Language, key: str) -> str:
	return TRANSLATIONS[Language(language)][key]
