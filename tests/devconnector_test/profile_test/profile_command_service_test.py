import unittest
import uuid
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.profile.profile_command_service import ProfileCommandService
from devconnector.entity.profile_entity import ProfileEntity
from devconnector.common.constants import ProfileSection


class TestProfileCommandService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.users_repository = AsyncMock()
        self.profile_repository = AsyncMock()
        self.post_repository = AsyncMock()
        self.logger = MagicMock()

        self.service = ProfileCommandService(
            users_repository=self.users_repository,
            profile_repository=self.profile_repository,
            post_repository=self.post_repository,
            logger=self.logger,
        )

        self.session = AsyncMock(spec=AsyncSession)
        self.user_id = uuid.uuid4()

        # upsert returns whatever it was given
        self.profile_repository.upsert_profile.side_effect = (
            lambda session, entity: entity
        )

    def _existing_profile(self, **overrides) -> ProfileEntity:
        values = dict(
            profile_id=1,
            user_id=self.user_id,
            status="Developer",
            company="Acme",
            skills=[" python"],
            social={"twitter": "t", "youtube": "y"},
            experience=[],
            education=[],
        )
        values.update(overrides)
        return ProfileEntity(**values)

    async def test_upsert_profile_creates_when_missing(self):
        """Scenario: the caller has no profile yet, a new one is created."""
        self.profile_repository.get_profile_by_user_id.return_value = None

        result = await self.service.upsert_profile(
            self.session,
            self.user_id,
            {"status": "Developer", "skills": [" a", " b"], "social": {"twitter": "t"}},
        )

        self.profile_repository.upsert_profile.assert_awaited_once()
        self.assertIsNone(result.profile_id)
        self.assertEqual(result.user_id, self.user_id)
        self.assertEqual(result.status, "Developer")
        self.assertEqual(result.skills, [" a", " b"])
        self.assertEqual(result.social, {"twitter": "t"})
        self.assertEqual(result.experience, [])
        self.assertEqual(result.education, [])
        self.assertIsNotNone(result.updated_timestamp)

    async def test_upsert_profile_updates_in_place(self):
        """Scenario: existing profile, only the sent fields change."""
        existing = self._existing_profile()
        self.profile_repository.get_profile_by_user_id.return_value = existing

        result = await self.service.upsert_profile(
            self.session,
            self.user_id,
            {"status": "Lead", "social": {"youtube": "new-y", "linkedin": "l"}},
        )

        self.assertIs(result, existing)
        self.assertEqual(result.profile_id, 1)
        self.assertEqual(result.status, "Lead")
        self.assertEqual(result.company, "Acme")
        self.assertEqual(result.skills, [" python"])
        self.assertEqual(
            result.social, {"twitter": "t", "youtube": "new-y", "linkedin": "l"}
        )

    async def test_upsert_profile_does_not_mutate_input(self):
        self.profile_repository.get_profile_by_user_id.return_value = None
        fields = {"status": "Dev", "skills": [" a"], "social": {"twitter": "t"}}

        await self.service.upsert_profile(self.session, self.user_id, fields)

        self.assertIn("social", fields)

    async def test_upsert_profile_repository_error_propagates(self):
        self.profile_repository.get_profile_by_user_id.return_value = None
        self.profile_repository.upsert_profile.side_effect = Exception("DB down")

        with self.assertRaises(Exception):
            await self.service.upsert_profile(
                self.session, self.user_id, {"status": "Dev", "skills": [" a"]}
            )

        self.logger.error.assert_called_once()

    async def test_add_entry_prepends_with_fresh_id(self):
        existing = self._existing_profile(
            experience=[{"id": "old", "title": "Engineer"}]
        )
        self.profile_repository.get_profile_by_user_id.return_value = existing

        result = await self.service.add_entry(
            self.session,
            self.user_id,
            ProfileSection.EXPERIENCE,
            {"title": "Lead", "company": "Acme", "from": "2021-01-01"},
        )

        self.assertEqual(len(result.experience), 2)
        new_entry = result.experience[0]
        self.assertEqual(new_entry["title"], "Lead")
        self.assertEqual(len(new_entry["id"]), 32)
        self.assertNotEqual(new_entry["id"], "old")
        self.assertEqual(result.experience[1]["id"], "old")

    async def test_add_entry_ids_are_unique(self):
        existing = self._existing_profile()
        self.profile_repository.get_profile_by_user_id.return_value = existing

        await self.service.add_entry(
            self.session, self.user_id, ProfileSection.EDUCATION, {"school": "A"}
        )
        await self.service.add_entry(
            self.session, self.user_id, ProfileSection.EDUCATION, {"school": "B"}
        )

        self.assertEqual([e["school"] for e in existing.education], ["B", "A"])
        self.assertNotEqual(existing.education[0]["id"], existing.education[1]["id"])

    async def test_add_entry_without_profile(self):
        self.profile_repository.get_profile_by_user_id.return_value = None

        with self.assertRaises(ValueError) as ctx:
            await self.service.add_entry(
                self.session, self.user_id, ProfileSection.EXPERIENCE, {}
            )

        self.assertEqual(str(ctx.exception), "There is no profile for this user")
        self.profile_repository.upsert_profile.assert_not_awaited()

    async def test_remove_entry_success(self):
        existing = self._existing_profile(
            education=[{"id": "d2", "school": "B"}, {"id": "d1", "school": "A"}]
        )
        self.profile_repository.get_profile_by_user_id.return_value = existing

        result = await self.service.remove_entry(
            self.session, self.user_id, ProfileSection.EDUCATION, "d2"
        )

        self.assertEqual(result.education, [{"id": "d1", "school": "A"}])
        self.profile_repository.upsert_profile.assert_awaited_once()

    async def test_remove_entry_unknown_id_changes_nothing(self):
        entries = [{"id": "e1", "title": "Engineer"}, {"id": "e2", "title": "Lead"}]
        existing = self._existing_profile(experience=list(entries))
        self.profile_repository.get_profile_by_user_id.return_value = existing

        with self.assertRaises(ValueError) as ctx:
            await self.service.remove_entry(
                self.session, self.user_id, ProfileSection.EXPERIENCE, "missing"
            )

        self.assertEqual(str(ctx.exception), "Experience not found")
        self.assertEqual(existing.experience, entries)
        self.profile_repository.upsert_profile.assert_not_awaited()

    async def test_remove_entry_without_profile(self):
        self.profile_repository.get_profile_by_user_id.return_value = None

        with self.assertRaises(ValueError) as ctx:
            await self.service.remove_entry(
                self.session, self.user_id, ProfileSection.EDUCATION, "d1"
            )

        self.assertEqual(str(ctx.exception), "There is no profile for this user")

    async def test_delete_helpers_delegate_to_repositories(self):
        self.post_repository.delete_posts_by_user_id.return_value = 3
        self.profile_repository.delete_profile_by_user_id.return_value = 1
        self.users_repository.delete_user_by_user_id.return_value = 1

        self.assertEqual(await self.service.delete_posts(self.session, self.user_id), 3)
        self.assertEqual(
            await self.service.delete_profile(self.session, self.user_id), 1
        )
        self.assertEqual(await self.service.delete_user(self.session, self.user_id), 1)

        self.post_repository.delete_posts_by_user_id.assert_awaited_once_with(
            self.session, self.user_id
        )
        self.profile_repository.delete_profile_by_user_id.assert_awaited_once_with(
            self.session, self.user_id
        )
        self.users_repository.delete_user_by_user_id.assert_awaited_once_with(
            self.session, self.user_id
        )


if __name__ == "__main__":
    unittest.main()
