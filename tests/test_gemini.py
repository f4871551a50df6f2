import unittest
from unittest.mock import MagicMock, patch
from google.genai import types
from config import Config
from refactoring.errors import ErrorKind, RefactorError
from refactoring.gemini import GeminiClient, extract_text


class TestExtractText(unittest.TestCase):
    def test_first_part_text(self):
        response = types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(
                        role="model",
                        parts=[types.Part(text="first"), types.Part(text="second")],
                    )
                )
            ]
        )
        self.assertEqual(extract_text(response), "first")

    def test_missing_pieces(self):
        responses = [
            None,
            types.GenerateContentResponse(),
            types.GenerateContentResponse(candidates=[]),
            types.GenerateContentResponse(candidates=[types.Candidate()]),
            types.GenerateContentResponse(
                candidates=[types.Candidate(content=types.Content(role="model", parts=[]))]
            ),
            types.GenerateContentResponse(
                candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part()]))]
            ),
        ]
        for response in responses:
            with self.subTest(response=response):
                self.assertIsNone(extract_text(response))


class TestGeminiClient(unittest.TestCase):
    def test_generate_text_success(self):
        sdk = MagicMock()
        sdk.models.generate_content.return_value = types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part(text="ok")]))]
        )
        client = GeminiClient(sdk, "model")

        self.assertEqual(client.generate_text("prompt"), "ok")
        sdk.models.generate_content.assert_called_once()

    def test_generate_text_no_valid_response(self):
        sdk = MagicMock()
        sdk.models.generate_content.return_value = types.GenerateContentResponse(candidates=[])
        client = GeminiClient(sdk, "model")

        with self.assertRaises(RefactorError) as ctx:
            client.generate_text("prompt")
        self.assertEqual(ctx.exception.kind, ErrorKind.UPSTREAM_PROTOCOL)
        self.assertEqual(ctx.exception.status, 500)
        self.assertEqual(ctx.exception.message, "Error: No valid response from the model")

    def test_generate_text_does_not_retry(self):
        sdk = MagicMock()
        sdk.models.generate_content.side_effect = ValueError("boom")
        client = GeminiClient(sdk, "model")

        with self.assertRaises(ValueError):
            client.generate_text("prompt")
        self.assertEqual(sdk.models.generate_content.call_count, 1)

    @patch("refactoring.gemini.genai.Client")
    def test_from_config_uses_vertex(self, mock_client_cls):
        config = Config(project_id="proj", location="europe-west3", model_name="gemini-x")
        client = GeminiClient.from_config(config)

        mock_client_cls.assert_called_once_with(vertexai=True, project="proj", location="europe-west3")
        self.assertIs(client.client, mock_client_cls.return_value)
        self.assertEqual(client.model_name, "gemini-x")
        self.assertEqual(client.temperature, 0.2)


if __name__ == '__main__':
    unittest.main()
