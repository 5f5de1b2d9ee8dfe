import unittest

from jina_client import (
    EmbeddingsModel,
    EmbeddingsRequest,
    EmbeddingsResponse,
    EmbeddingType,
    ImageDoc,
    TextDoc,
)

from .utils import TEST_BASE_URL, RecordingTransport, make_client

EMBEDDINGS_BODY = {
    "model": "test-model",
    "data": [
        {
            "index": 0,
            "embedding": [0.1, 0.2, 0.3],
            "object": "embedding",
        }
    ],
    "usage": {
        "total_tokens": 3,
        "prompt_tokens": 3,
    },
}


class TestEmbeddings(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.transport = RecordingTransport(json_body=EMBEDDINGS_BODY)
        self.client = make_client(self.transport)

    async def asyncTearDown(self):
        await self.client._http_client.aclose()

    async def embed(self, **kwargs) -> EmbeddingsResponse:
        request = EmbeddingsRequest(model=EmbeddingsModel.CLIP_V1, **kwargs)
        return await self.client.embeddings(request)

    async def test_embeddings(self):
        response = await self.embed(input="Hello, world!")

        self.assertEqual(response.model, "test-model")
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0].index, 0)
        self.assertEqual(response.data[0].embedding, [0.1, 0.2, 0.3])
        self.assertEqual(response.data[0].object, "embedding")
        self.assertEqual(response.usage.total_tokens, 3)
        self.assertEqual(response.usage.prompt_tokens, 3)

        request = self.transport.last_request
        self.assertEqual(request.method, "POST")
        self.assertEqual(str(request.url), f"{TEST_BASE_URL}/v1/embeddings")
        self.assertEqual(request.headers["authorization"], "Bearer test-key")
        self.assertEqual(request.headers["content-type"], "application/json")

    async def test_string_input_is_sent_as_string(self):
        await self.embed(input="Hello")
        self.assertEqual(self.transport.last_body(), {"model": "jina-clip-v1", "input": "Hello"})

    async def test_string_list_input_is_sent_as_array(self):
        await self.embed(input=["Hello", "World"])
        self.assertEqual(self.transport.last_body()["input"], ["Hello", "World"])

    async def test_doc_input_is_sent_as_object(self):
        await self.embed(input=ImageDoc(image="https://example.com/cat.png"))
        self.assertEqual(self.transport.last_body()["input"], {"image": "https://example.com/cat.png"})

    async def test_doc_list_input_is_sent_as_array_of_objects(self):
        await self.embed(input=[TextDoc(text="a cat"), ImageDoc(image="https://example.com/cat.png")])
        self.assertEqual(
            self.transport.last_body()["input"],
            [{"text": "a cat"}, {"image": "https://example.com/cat.png"}],
        )

    async def test_optional_fields_are_omitted_when_unset(self):
        await self.embed(input="Hello")
        body = self.transport.last_body()
        self.assertNotIn("embedding_type", body)
        self.assertNotIn("normalized", body)

    async def test_optional_fields_are_sent_when_set(self):
        await self.embed(
            input="Hello",
            embedding_type=[EmbeddingType.FLOAT, EmbeddingType.UBINARY],
            normalized=True,
        )
        body = self.transport.last_body()
        self.assertEqual(body["embedding_type"], ["float", "ubinary"])
        self.assertIs(body["normalized"], True)

    async def test_single_embedding_type(self):
        await self.embed(input="Hello", embedding_type=EmbeddingType.BASE64)
        self.assertEqual(self.transport.last_body()["embedding_type"], "base64")

    async def test_model_identifiers(self):
        for model in EmbeddingsModel:
            request = EmbeddingsRequest(model=model, input="x")
            await self.client.embeddings(request)
            self.assertEqual(self.transport.last_body()["model"], model.value)

        self.assertEqual(EmbeddingsModel.EMBEDDINGS_V2_BASE_CODE.value, "jina-embeddings-v2-base-code")


if __name__ == "__main__":
    unittest.main()
