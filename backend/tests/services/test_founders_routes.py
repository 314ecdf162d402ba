"""Founders Routes — end-to-end HTTP tests through the ASGI app.

Invariants:
    - Every response carries success; failures add error and code
    - Conflicts and validation failures are 400, unknown ids are 404
    - Approval reports email problems in warnings with a 200
"""

import re
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from sqlalchemy import select

from founders_club.core.repository_protocols import MailResult
from founders_club.models.founders_request import FoundersRequest
from founders_club.models.invite_code import InviteCode

CODE_RE = re.compile(r"^FC-[ABCDEFGHJKLMNPQRSTUVWXYZ23456789]{8}$")

JANE = {
    "fullName": "Jane Doe",
    "email": "JANE@X.COM",
    "phone": "+1 555",
    "profession": "Designer",
}


async def test_submit_then_lookup_pending(client):
    res = await client.post("/founders/request", json=JANE)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["requestId"]

    res = await client.get("/founders/request", params={"email": "jane@x.com"})
    assert res.status_code == 200
    body = res.json()
    assert body["hasRequest"] is True
    assert body["status"] == "pending"
    assert "createdAt" in body


async def test_submit_accepts_split_name(client, test_db):
    res = await client.post("/founders/request", json={
        "firstName": "Jane", "lastName": "Doe", "email": "jane@x.com",
        "phone": "+1 555", "profession": "Designer",
    })
    assert res.status_code == 200
    stored = await test_db.scalar(
        select(FoundersRequest).where(FoundersRequest.email == "jane@x.com"),
    )
    assert stored.full_name == "Jane Doe"


async def test_submit_missing_field_is_400(client):
    res = await client.post("/founders/request", json={**JANE, "phone": ""})
    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "error": "All required fields must be provided",
        "code": "VALIDATION_ERROR",
    }


async def test_submit_bad_email_is_400(client):
    res = await client.post("/founders/request", json={**JANE, "email": "nope"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid email format"


async def test_submit_wrong_type_is_400(client):
    res = await client.post("/founders/request", json={**JANE, "email": 42})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]


async def test_duplicate_pending_is_400(client):
    await client.post("/founders/request", json=JANE)
    res = await client.post("/founders/request", json=JANE)
    assert res.status_code == 400
    assert res.json()["code"] == "CONFLICT"
    assert "pending request" in res.json()["error"]


async def test_lookup_without_email_is_400(client):
    res = await client.get("/founders/request")
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_lookup_unknown_email(client):
    res = await client.get("/founders/request", params={"email": "ghost@x.com"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "hasRequest": False}


async def test_full_workflow(client, mailer, test_db):
    res = await client.post("/founders/request", json=JANE)
    request_id = res.json()["requestId"]

    before = datetime.now(timezone.utc)
    res = await client.post("/founders/approve", json={"requestId": request_id})
    after = datetime.now(timezone.utc)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert CODE_RE.match(body["code"])
    assert body["warnings"] == []
    expires = datetime.fromisoformat(body["expiresAt"].replace("Z", "+00:00"))
    assert before + timedelta(hours=72) <= expires <= after + timedelta(hours=72)

    res = await client.get("/founders/request", params={"email": "JANE@X.COM"})
    assert res.json()["status"] == "approved"

    assert mailer.sent[0]["to"] == "jane@x.com"

    res = await client.post("/founders/request", json=JANE)
    assert res.status_code == 400
    assert "already approved" in res.json()["error"]


async def test_approve_twice_is_400_with_single_code(client, seed_request, test_db):
    rid = seed_request.id
    first = await client.post("/founders/approve", json={"requestId": str(rid)})
    assert first.status_code == 200

    second = await client.post("/founders/approve", json={"requestId": str(rid)})
    assert second.status_code == 400
    assert second.json()["error"] == "Request has already been processed"

    codes = (await test_db.scalars(
        select(InviteCode).where(InviteCode.request_id == rid),
    )).all()
    assert len(codes) == 1


async def test_approve_unknown_is_404(client):
    res = await client.post("/founders/approve", json={"requestId": str(uuid4())})
    assert res.status_code == 404
    assert res.json() == {
        "success": False, "error": "Request not found", "code": "RESOURCE_NOT_FOUND",
    }


async def test_approve_missing_id_is_400(client):
    res = await client.post("/founders/approve", json={})
    assert res.status_code == 400
    assert res.json()["error"] == "Request ID is required"


async def test_approve_email_failure_still_succeeds(client, mailer, seed_request):
    mailer.result = MailResult(success=False, error="relay down")
    res = await client.post(
        "/founders/approve", json={"requestId": str(seed_request.id)},
    )
    assert res.status_code == 200
    assert res.json()["warnings"] == ["email_not_sent"]


async def test_list_requests(client):
    await client.post("/founders/request", json=JANE)
    await client.post("/founders/request", json={**JANE, "email": "bob@x.com"})

    res = await client.get("/founders/requests", params={"status": "pending", "limit": 10})
    assert res.status_code == 200
    body = res.json()
    assert {r["email"] for r in body["requests"]} == {"jane@x.com", "bob@x.com"}
    assert body["pagination"] == {"limit": 10, "offset": 0}
    assert all(r["status"] == "pending" for r in body["requests"])


async def test_list_requests_rejects_bad_status(client):
    res = await client.get("/founders/requests", params={"status": "rejected"})
    assert res.status_code == 400
