"""Task routes — create acknowledges, flags persist together, delete answers 204/404."""


async def _create(client, user_id: int, **overrides) -> None:
    payload = {
        "title": "File taxes",
        "description": "before April",
        "creation_date": "2026-01-15T09:30:00+00:00",
        "due_date": "2026-04-15",
        "completed": False,
        "user_id": user_id,
    }
    payload.update(overrides)
    res = await client.post("/tasks", json=payload)
    assert res.status_code == 201
    assert res.text == "Task added"


async def _only_task(client, user_id: int) -> dict:
    tasks = (await client.get(f"/tasks/{user_id}")).json()
    assert len(tasks) == 1
    return tasks[0]


async def test_create_task_then_list(client, seed_user):
    await _create(client, seed_user.id)

    task = await _only_task(client, seed_user.id)
    assert task["title"] == "File taxes"
    assert task["description"] == "before April"
    assert task["due_date"] == "2026-04-15"
    assert task["completed"] is False
    assert task["is_pinned"] is False
    assert task["user_id"] == seed_user.id


async def test_create_task_without_due_date(client, seed_user):
    await _create(client, seed_user.id, due_date=None)
    task = await _only_task(client, seed_user.id)
    assert task["due_date"] is None


async def test_create_task_without_user_returns_400(client):
    res = await client.post("/tasks", json={"title": "orphan"})
    assert res.status_code == 400


async def test_list_tasks_is_scoped_by_user(client, seed_user):
    await _create(client, seed_user.id, title="mine")
    await _create(client, seed_user.id + 1, title="theirs")
    task = await _only_task(client, seed_user.id)
    assert task["title"] == "mine"


async def test_update_task_writes_both_flags(client, seed_user):
    await _create(client, seed_user.id)
    task = await _only_task(client, seed_user.id)

    res = await client.put("/tasks/update", json={
        "taskId": task["id"], "is_pinned": True, "completed": True,
    })
    assert res.status_code == 201
    assert res.text == "Task Updated"

    updated = await _only_task(client, seed_user.id)
    assert updated["is_pinned"] is True
    assert updated["completed"] is True


async def test_update_unknown_task_still_acknowledges(client):
    res = await client.put("/tasks/update", json={
        "taskId": 9999, "is_pinned": True, "completed": False,
    })
    assert res.status_code == 201


async def test_update_task_requires_both_flags(client):
    res = await client.put("/tasks/update", json={"taskId": 1, "is_pinned": True})
    assert res.status_code == 400


async def test_delete_task_returns_204_and_removes_it(client, seed_user):
    await _create(client, seed_user.id)
    task = await _only_task(client, seed_user.id)

    res = await client.delete(f"/tasks/{task['id']}")
    assert res.status_code == 204

    assert (await client.get(f"/tasks/{seed_user.id}")).json() == []


async def test_delete_unknown_task_returns_404(client):
    res = await client.delete("/tasks/9999")
    assert res.status_code == 404
    assert res.json()["message"] == "Task not found"


async def test_create_task_with_iso_datetime_due_date(client, seed_user):
    await _create(client, seed_user.id, due_date="2026-04-15T10:00:00.000Z")
    task = await _only_task(client, seed_user.id)
    assert task["due_date"] == "2026-04-15"
