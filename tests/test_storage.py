from promptdesk.database.init import seed_defaults


async def test_seed_creates_two_accounts_and_sample_prompt(storage):
    admin = await storage.get_user_by_username("admin")
    user = await storage.get_user_by_username("user")
    prompts = await storage.list_prompts()

    assert admin.is_admin is True
    assert admin.password == "admin123"
    assert user.is_admin is False
    assert [p.name for p in prompts] == ["Customer Support Assistant"]
    assert prompts[0].provider == "openai"
    assert prompts[0].created_by == admin.id


async def test_seed_is_idempotent(storage, settings):
    assert await seed_defaults(storage, settings) is False
    assert len(await storage.list_prompts()) == 1


async def test_username_lookup_is_case_sensitive(storage):
    assert await storage.get_user_by_username("Admin") is None


async def test_messages_listed_in_insertion_order(storage):
    prompt = (await storage.list_prompts())[0]
    for n in range(5):
        await storage.create_message(prompt.id, f"m{n}", n % 2 == 0, "2024-01-01T00:00:00.000Z")

    messages = await storage.list_messages(prompt.id)

    assert [m.content for m in messages] == ["m0", "m1", "m2", "m3", "m4"]
    ids = [m.id for m in messages]
    assert ids == sorted(ids) and len(set(ids)) == len(ids)


async def test_append_then_list_round_trip(storage):
    prompt = (await storage.list_prompts())[0]
    await storage.create_message(prompt.id, "first", True, "2024-01-01T00:00:00.000Z")
    created = await storage.create_message(prompt.id, "reply", False, "2024-01-01T00:00:01.000Z")

    last = (await storage.list_messages(prompt.id))[-1]

    assert last.id == created.id
    assert (last.content, last.is_user) == ("reply", False)


async def test_messages_are_scoped_to_their_prompt(storage):
    first = (await storage.list_prompts())[0]
    second = await storage.create_prompt(
        {
            "name": "Other",
            "provider": "google",
            "model": "gemini-pro",
            "temperature": 1.0,
            "content": "Be brief.",
            "created_by": 1,
        }
    )
    await storage.create_message(first.id, "a", True, "t")
    await storage.create_message(second.id, "b", True, "t")

    assert [m.content for m in await storage.list_messages(second.id)] == ["b"]


async def test_clear_messages_removes_all_and_tolerates_empty(storage):
    prompt = (await storage.list_prompts())[0]
    await storage.create_message(prompt.id, "a", True, "t")
    await storage.create_message(prompt.id, "b", False, "t")

    assert await storage.clear_messages(prompt.id) == 2
    assert await storage.list_messages(prompt.id) == []
    assert await storage.clear_messages(prompt.id) == 0


async def test_update_merges_fields(storage):
    prompt = (await storage.list_prompts())[0]

    updated = await storage.update_prompt(prompt.id, {"temperature": 1.5})

    assert updated.temperature == 1.5
    assert updated.name == prompt.name
    assert (await storage.get_prompt(prompt.id)).temperature == 1.5


async def test_update_and_delete_unknown_prompt(storage):
    assert await storage.update_prompt(999, {"name": "x"}) is None
    assert await storage.delete_prompt(999) is False


async def test_delete_prompt_reports_existence(storage):
    prompt = (await storage.list_prompts())[0]

    assert await storage.delete_prompt(prompt.id) is True
    assert await storage.get_prompt(prompt.id) is None
    assert await storage.delete_prompt(prompt.id) is False
