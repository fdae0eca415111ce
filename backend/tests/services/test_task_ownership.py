"""Task Ownership — one user can never observe or touch another user's task.

Invariants:
    - B's get/update/delete of A's task id → 404 with the same body as a missing id
    - A's task is unchanged after B's attempts
    - Lists never mix owners
"""

NEW_TASK = {"title": "Private", "description": "Alice only", "city": "Paris"}
MISSING_ID = "00000000-0000-0000-0000-000000000000"


async def _alice_task(client, alice):
    res = await client.post("/api/tasks", json=NEW_TASK, headers=alice)
    assert res.status_code == 201
    return res.json()


async def test_other_user_get_is_not_found(client, alice, bob):
    task = await _alice_task(client, alice)
    res = await client.get(f"/api/tasks/{task['id']}", headers=bob)
    missing = await client.get(f"/api/tasks/{MISSING_ID}", headers=bob)
    assert res.status_code == 404
    assert res.json()["error"]["message"] == missing.json()["error"]["message"]
    assert "Alice only" not in res.text


async def test_other_user_update_is_not_found(client, alice, bob):
    task = await _alice_task(client, alice)
    res = await client.put(
        f"/api/tasks/{task['id']}", json={"title": "hijacked"}, headers=bob,
    )
    assert res.status_code == 404

    still = await client.get(f"/api/tasks/{task['id']}", headers=alice)
    assert still.json()["title"] == "Private"


async def test_other_user_delete_is_not_found(client, alice, bob):
    task = await _alice_task(client, alice)
    res = await client.delete(f"/api/tasks/{task['id']}", headers=bob)
    assert res.status_code == 404

    still = await client.get(f"/api/tasks/{task['id']}", headers=alice)
    assert still.status_code == 200


async def test_lists_are_scoped_per_owner(client, alice, bob):
    await _alice_task(client, alice)
    res = await client.post(
        "/api/tasks", json={**NEW_TASK, "title": "Bob's"}, headers=bob,
    )
    assert res.status_code == 201

    alice_titles = [t["title"] for t in (await client.get("/api/tasks", headers=alice)).json()]
    bob_titles = [t["title"] for t in (await client.get("/api/tasks", headers=bob)).json()]
    assert alice_titles == ["Private"]
    assert bob_titles == ["Bob's"]
