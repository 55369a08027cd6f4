"""Amazon Bedrock embedding strategy."""

import json
import threading

import boto3
from botocore.exceptions import ClientError

from semantic_splitter.config.embedding.models import EmbeddingConfig
from semantic_splitter.config.settings import get_settings
from semantic_splitter.services.embedder.base import BaseEmbeddingStrategy


def _extract_embedding(payload: dict) -> list[float]:
    emb = payload.get("embedding")
    if emb is None:
        # Titan V2 can return embeddingsByType
        by_type = payload.get("embeddingsByType") or {}
        emb = by_type.get("float") or next(iter(by_type.values()), None)
    if not emb:
        raise ValueError("Bedrock response contained no embedding")
    return [float(x) for x in emb]


class BedrockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Amazon Bedrock Titan embeddings, one invoke_model call per text. Credentials come from
    the usual boto3 chain; region from config.region or settings.aws_region. A runtime client
    is created once per region and shared, boto3 clients being safe across threads.
    """

    def __init__(self) -> None:
        self._clients: dict[str | None, object] = {}
        self._lock = threading.Lock()

    @property
    def strategy_name(self) -> str:
        return "bedrock"

    def _get_client(self, region: str | None):
        with self._lock:
            client = self._clients.get(region)
            if client is None:
                client = boto3.client("bedrock-runtime", region_name=region)
                self._clients[region] = client
            return client

    def _invoke(self, client, model_id: str, text: str) -> list[float]:
        try:
            response = client.invoke_model(
                modelId=model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps({"inputText": text}),
            )
        except ClientError as e:
            raise ValueError(f"Bedrock invoke_model failed for model {model_id!r}: {e}") from e
        return _extract_embedding(json.loads(response["body"].read().decode("utf-8")))

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        client = self._get_client(config.region or get_settings().aws_region or None)
        return [self._invoke(client, config.model, text) for text in texts]
