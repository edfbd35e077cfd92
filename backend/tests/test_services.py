import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from study_assistant import services
from study_assistant.errors import ErrorCategory, UserError
from study_assistant.gemini_client import GeminiError
from study_assistant.i18n import Language
from study_assistant.schemas import EXAM_INFO_SCHEMA, FACT_SCHEMA


def _oracle(reply=None, error=None):
	client = MagicMock()
	client.generate = AsyncMock(return_value=reply, side_effect=error)
	return client


FENCED_FACTS = '```json\n{"facts":["a","b","c","d","e"],"related_topics":["x","y","z"]}\n```'

EXAM_JSON = (
	'{"description": "Civil services exam", "apply_start_date": "February (tentative)", '
	'"apply_end_date": "March (tentative)", "exam_pattern": "Prelims\\nMains\\nInterview", '
	'"syllabus": "GS I-IV"}'
)


class TestGenerateFacts(unittest.IsolatedAsyncioTestCase):
	async def test_fenced_reply_is_parsed(self):
		client = _oracle(FENCED_FACTS)
		result = await services.generate_facts("Black Holes", Language.EN, client=client)
		self.assertEqual(len(result.facts), 5)
		self.assertEqual(len(result.related_topics), 3)
		prompt = client.generate.await_args.args[0]
		self.assertIn('"Black Holes"', prompt)
		self.assertEqual(client.generate.await_args.kwargs["response_schema"], FACT_SCHEMA)

	async def test_blank_topic_never_calls_model(self):
		client = _oracle(FENCED_FACTS)
		for topic in ("", "   \n\t"):
			with self.assertRaises(UserError) as ctx:
				await services.generate_facts(topic, Language.EN, client=client)
			self.assertEqual(ctx.exception.category, ErrorCategory.VALIDATION_FAILED)
			self.assertEqual(ctx.exception.message, "Please enter a topic to generate facts.")
		client.generate.assert_not_awaited()

	async def test_validation_message_is_localized(self):
		with self.assertRaises(UserError) as ctx:
			await services.generate_facts(" ", Language.HI, client=_oracle())
		self.assertEqual(ctx.exception.message, "तथ्य बनाने के लिए कृपया एक विषय दर्ज करें।")

	async def test_bad_json_is_malformed_response(self):
		client = _oracle("Here are some facts: the sun is hot.")
		with self.assertRaises(UserError) as ctx:
			await services.generate_facts("Sun", Language.EN, client=client)
		self.assertEqual(ctx.exception.category, ErrorCategory.MALFORMED_RESPONSE)
		self.assertIn("generating facts", ctx.exception.message)

	async def test_missing_field_is_malformed_response(self):
		client = _oracle('{"facts": ["a"]}')
		with self.assertRaises(UserError) as ctx:
			await services.generate_facts("Sun", Language.EN, client=client)
		self.assertEqual(ctx.exception.category, ErrorCategory.MALFORMED_RESPONSE)

	async def test_service_unavailable(self):
		client = _oracle(error=GeminiError("Error 503: overloaded", status_code=503))
		with self.assertRaises(UserError) as ctx:
			await services.generate_facts("Sun", Language.EN, client=client)
		self.assertEqual(ctx.exception.category, ErrorCategory.SERVICE_UNAVAILABLE)
		self.assertEqual(ctx.exception.message, "The AI service is temporarily unavailable. Please try again later.")
		self.assertEqual(client.generate.await_count, 1)

	async def test_classified_error_keeps_cause(self):
		cause = GeminiError("Response blocked due to SAFETY")
		with self.assertRaises(UserError) as ctx:
			await services.generate_facts("Sun", Language.EN, client=_oracle(error=cause))
		self.assertIs(ctx.exception.__cause__, cause)


class TestOtherOperations(unittest.IsolatedAsyncioTestCase):
	async def test_summary_returns_text_as_is(self):
		client = _oracle("  A short summary.\n")
		summary = await services.summarize_text("long text", Language.EN, client=client)
		self.assertEqual(summary, "  A short summary.\n")
		self.assertIsNone(client.generate.await_args.kwargs["response_schema"])

	async def test_summary_requires_content(self):
		client = _oracle("x")
		with self.assertRaises(UserError) as ctx:
			await services.summarize_text("  ", Language.EN, client=client)
		self.assertEqual(ctx.exception.category, ErrorCategory.VALIDATION_FAILED)
		client.generate.assert_not_awaited()

	async def test_fact_of_the_day(self):
		client = _oracle("Honey never spoils.")
		self.assertEqual(await services.get_fact_of_the_day(Language.EN, client=client), "Honey never spoils.")

	async def test_current_affairs_lines(self):
		client = _oracle("- Point A\n* Point B\n\nPoint C")
		items = await services.generate_current_affairs(Language.HI, client=client)
		self.assertEqual(items, ["Point A", "Point B", "Point C"])
		self.assertIn("in Hindi", client.generate.await_args.args[0])

	async def test_exam_info(self):
		client = _oracle(EXAM_JSON)
		result = await services.generate_exam_info("UPSC CSE", Language.EN, client=client)
		self.assertEqual(result.apply_start_date, "February (tentative)")
		self.assertEqual(result.exam_pattern, "Prelims\nMains\nInterview")
		self.assertEqual(client.generate.await_args.kwargs["response_schema"], EXAM_INFO_SCHEMA)

	async def test_exam_info_requires_name(self):
		with self.assertRaises(UserError) as ctx:
			await services.generate_exam_info("", Language.EN, client=_oracle(EXAM_JSON))
		self.assertEqual(ctx.exception.message, "Please enter an exam name.")

	async def test_recitation_names_context(self):
		client = _oracle(error=GeminiError("Response blocked due to RECITATION"))
		with self.assertRaises(UserError) as ctx:
			await services.summarize_text("song lyrics", Language.EN, client=client)
		self.assertEqual(ctx.exception.category, ErrorCategory.RECITATION_BLOCKED)
		self.assertIn("summarizing text", ctx.exception.message)


class TestOwnedClient(unittest.IsolatedAsyncioTestCase):
	async def test_client_is_created_and_closed(self):
		instance = MagicMock()
		instance.generate = AsyncMock(return_value="Honey never spoils.")
		instance.aclose = AsyncMock()
		with patch.object(services, "GeminiClient", return_value=instance) as factory:
			fact = await services.get_fact_of_the_day(Language.EN)
		self.assertEqual(fact, "Honey never spoils.")
		factory.assert_called_once_with()
		instance.aclose.assert_awaited_once()

	async def test_client_closed_after_failure(self):
		instance = MagicMock()
		instance.generate = AsyncMock(side_effect=GeminiError("Gemini API error 500: internal"))
		instance.aclose = AsyncMock()
		with patch.object(services, "GeminiClient", return_value=instance):
			with self.assertRaises(UserError):
				await services.get_fact_of_the_day(Language.EN)
		instance.aclose.assert_awaited_once()

	async def test_missing_key_is_auth_config(self):
		with patch.object(services, "GeminiClient", side_effect=ValueError("GEMINI_API_KEY is not configured")):
			with self.assertRaises(UserError) as ctx:
				await services.generate_current_affairs(Language.EN)
		self.assertEqual(ctx.exception.category, ErrorCategory.AUTH_CONFIG)


if __name__ == "__main__":
	unittest.main()
