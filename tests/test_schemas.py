import unittest

from pydantic import ValidationError

from jina_client import (
    EmbeddingsModel,
    EmbeddingsRequest,
    EmbeddingsResponse,
    ImageDoc,
    TextDoc,
    Usage,
)


class TestEmbeddingsInputShapes(unittest.TestCase):
    def decode(self, input_json: str) -> EmbeddingsRequest:
        return EmbeddingsRequest.model_validate_json(f'{{"model": "jina-clip-v1", "input": {input_json}}}')

    def test_string(self):
        self.assertEqual(self.decode('"Hello"').input, "Hello")

    def test_string_array(self):
        self.assertEqual(self.decode('["Hello", "World"]').input, ["Hello", "World"])

    def test_text_object(self):
        self.assertEqual(self.decode('{"text": "Hello"}').input, TextDoc(text="Hello"))

    def test_image_object(self):
        self.assertEqual(self.decode('{"image": "https://example.com/a.png"}').input, ImageDoc(image="https://example.com/a.png"))

    def test_array_of_objects(self):
        request = self.decode('[{"text": "a"}, {"image": "b"}]')
        self.assertEqual(request.input, [TextDoc(text="a"), ImageDoc(image="b")])

    def test_unknown_object_rejected(self):
        with self.assertRaises(ValidationError):
            self.decode('{"video": "x"}')

    def test_unknown_model_rejected(self):
        with self.assertRaises(ValidationError):
            EmbeddingsRequest(model="jina-embeddings-v9", input="x")


class TestImmutability(unittest.TestCase):
    def test_request_is_frozen(self):
        request = EmbeddingsRequest(model=EmbeddingsModel.CLIP_V1, input="x")
        with self.assertRaises(ValidationError):
            request.input = "y"

    def test_usage_is_frozen(self):
        usage = Usage(prompt_tokens=1, total_tokens=2)
        with self.assertRaises(ValidationError):
            usage.total_tokens = 3


class TestResponses(unittest.TestCase):
    def test_negative_usage_rejected(self):
        with self.assertRaises(ValidationError):
            Usage(prompt_tokens=-1, total_tokens=0)

    def test_multiple_embedding_types(self):
        response = EmbeddingsResponse.model_validate(
            {
                "model": "jina-clip-v1",
                "data": [
                    {
                        "index": 0,
                        "embedding": {"float": [0.5, -0.5], "base64": "AAA="},
                        "object": "embedding",
                    }
                ],
                "usage": {"total_tokens": 2, "prompt_tokens": 2},
            }
        )

        self.assertEqual(response.data[0].embedding["float"], [0.5, -0.5])
        self.assertEqual(response.data[0].embedding["base64"], "AAA=")


if __name__ == "__main__":
    unittest.main()
