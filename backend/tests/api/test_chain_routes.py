"""Chain Routes: HTTP read/append behavior end to end.

Invariants:
    - GET returns the whole chain as a JSON array of five-field objects
    - POST with a valid body returns 201 and the committed block
    - Malformed bodies are rejected with 400 before the ledger is touched
    - Rejected candidates surface as 409 with the candidate in the error context
"""

import dataclasses

from pulse_ledger.core.chain_rules import generate_candidate
from pulse_ledger.infrastructure import ledger_handle as handle_module

WIRE_FIELDS = {"index", "timestamp", "payload", "hash", "prev_hash"}


async def test_get_chain_returns_genesis_only(client):
    res = await client.get("/api/v1/chain")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    blocks = res.json()
    assert len(blocks) == 1
    assert set(blocks[0]) == WIRE_FIELDS
    assert blocks[0]["index"] == 0
    assert blocks[0]["prev_hash"] == ""


async def test_response_is_pretty_printed(client):
    res = await client.get("/api/v1/chain")
    assert res.text.startswith("[\n  {")


async def test_post_appends_and_returns_block(client):
    genesis = (await client.get("/api/v1/chain")).json()[0]
    res = await client.post("/api/v1/chain", json={"payload": 60})
    assert res.status_code == 201
    block = res.json()
    assert block["index"] == 1
    assert block["payload"] == 60
    assert block["prev_hash"] == genesis["hash"]


async def test_end_to_end_scenario(client):
    first = (await client.post("/api/v1/chain", json={"payload": 60})).json()
    second = (await client.post("/api/v1/chain", json={"payload": 75})).json()
    assert second["index"] == 2
    assert second["prev_hash"] == first["hash"]

    blocks = (await client.get("/api/v1/chain")).json()
    assert [b["index"] for b in blocks] == [0, 1, 2]
    for old, new in zip(blocks, blocks[1:]):
        assert new["prev_hash"] == old["hash"]


async def test_bpm_alias_accepted(client):
    res = await client.post("/api/v1/chain", json={"BPM": 72})
    assert res.status_code == 201
    assert res.json()["payload"] == 72


async def test_negative_payload_accepted(client):
    res = await client.post("/api/v1/chain", json={"payload": -3})
    assert res.status_code == 201


async def test_string_payload_rejected_without_append(client, shared_ledger):
    res = await client.post("/api/v1/chain", json={"payload": "60"})
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "INVALID_PAYLOAD"
    assert body["category"] == "validation"
    assert body["details"][0]["field"] == "payload"
    assert "context" not in body
    assert len(shared_ledger) == 1


async def test_missing_payload_rejected(client, shared_ledger):
    res = await client.post("/api/v1/chain", json={"value": 60})
    assert res.status_code == 400
    assert len(shared_ledger) == 1


async def test_non_json_body_rejected(client, shared_ledger):
    res = await client.post(
        "/api/v1/chain", content=b"not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert len(shared_ledger) == 1


async def test_float_and_bool_payloads_rejected(client, shared_ledger):
    assert (await client.post("/api/v1/chain", json={"payload": 60.5})).status_code == 400
    assert (await client.post("/api/v1/chain", json={"payload": True})).status_code == 400
    assert len(shared_ledger) == 1


async def test_unsupported_method_is_405(client):
    res = await client.put("/api/v1/chain", json={"payload": 1})
    assert res.status_code == 405


async def test_unknown_path_is_404(client):
    res = await client.get("/api/v1/nowhere")
    assert res.status_code == 404


async def test_rejected_append_returns_409_with_candidate(client, shared_ledger, monkeypatch):
    def tampering(tail, payload, clock):
        return dataclasses.replace(generate_candidate(tail, payload, clock), payload=0)

    monkeypatch.setattr("pulse_ledger.core.ledger.generate_candidate", tampering)
    res = await client.post("/api/v1/chain", json={"payload": 60})

    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "BLOCK_REJECTED"
    assert error["context"]["reason"] == "hash_mismatch"
    assert error["context"]["block"]["index"] == 1
    assert set(error["context"]["block"]) == WIRE_FIELDS
    assert len(shared_ledger) == 1
    assert res.text.startswith("{\n  \"error\": {")


async def test_tail_endpoint(client):
    posted = (await client.post("/api/v1/chain", json={"payload": 60})).json()
    res = await client.get("/api/v1/chain/tail")
    assert res.status_code == 200
    assert res.json() == posted


async def test_verify_endpoint_reports_sound_chain(client):
    await client.post("/api/v1/chain", json={"payload": 60})
    res = await client.get("/api/v1/chain/verify")
    assert res.status_code == 200
    assert res.json() == {"valid": True, "length": 2, "first_invalid_index": None}


async def test_serialization_failure_is_500(client, monkeypatch):
    class _Unserializable:
        @classmethod
        def from_block(cls, block):
            return cls()

        def model_dump(self):
            return {"index": 0, "payload": float("nan")}

    monkeypatch.setattr("pulse_ledger.api.routes.chain.BlockResponse", _Unserializable)
    res = await client.get("/api/v1/chain/tail")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "SERIALIZATION_ERROR"


async def test_uninitialized_ledger_is_503(client):
    handle_module.ledger_handle = None
    res = await client.get("/api/v1/chain")
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "LEDGER_NOT_INITIALIZED"
