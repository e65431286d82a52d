import unittest
from datetime import date

from pydantic import ValidationError

from devconnector.dto.profile_request_dto import (
    ProfileRequestDto,
    ExperienceRequestDto,
    EducationRequestDto,
)


class TestProfileRequestDto(unittest.TestCase):
    def test_comma_separated_skills(self):
        dto = ProfileRequestDto.model_validate(
            {"status": "Developer", "skills": "a, b, c"}
        )

        self.assertEqual(dto.skills, [" a", " b", " c"])

    def test_skills_are_trimmed_before_prefixing(self):
        dto = ProfileRequestDto.model_validate(
            {"status": "Developer", "skills": "  html ,css"}
        )

        self.assertEqual(dto.skills, [" html", " css"])

    def test_skills_list_kept_as_sent(self):
        dto = ProfileRequestDto.model_validate(
            {"status": "Developer", "skills": ["python", " sql"]}
        )

        self.assertEqual(dto.skills, ["python", " sql"])

    def test_to_db_dict_keeps_present_non_empty_fields(self):
        dto = ProfileRequestDto.model_validate(
            {
                "status": "Developer",
                "skills": "python",
                "company": "",
                "bio": None,
                "location": "Berlin",
                "unknown": "dropped",
            }
        )

        self.assertEqual(
            dto.to_db_dict(),
            {"status": "Developer", "skills": [" python"], "location": "Berlin"},
        )

    def test_to_db_dict_nests_social_links(self):
        dto = ProfileRequestDto.model_validate(
            {
                "status": "Developer",
                "skills": ["python"],
                "youtube": "https://youtube.com/alice",
                "instagram": "https://instagram.com/alice",
                "twitter": "",
            }
        )

        fields = dto.to_db_dict()

        self.assertEqual(
            fields["social"],
            {
                "youtube": "https://youtube.com/alice",
                "instagram": "https://instagram.com/alice",
            },
        )
        self.assertNotIn("youtube", fields)
        self.assertNotIn("twitter", fields)

    def test_to_db_dict_without_social_links(self):
        dto = ProfileRequestDto.model_validate({"status": "Dev", "skills": ["go"]})

        self.assertNotIn("social", dto.to_db_dict())


class TestProfileEntryRequestDto(unittest.TestCase):
    def test_experience_to_entry(self):
        dto = ExperienceRequestDto.model_validate(
            {
                "title": "Engineer",
                "company": "Acme",
                "from": "2019-03-01",
                "to": "2020-04-30",
                "description": "Built things",
            }
        )

        self.assertEqual(dto.from_date, date(2019, 3, 1))
        self.assertEqual(
            dto.to_entry(),
            {
                "from": "2019-03-01",
                "to": "2020-04-30",
                "current": False,
                "description": "Built things",
                "title": "Engineer",
                "company": "Acme",
                "location": None,
            },
        )

    def test_empty_to_means_open_ended(self):
        dto = ExperienceRequestDto.model_validate(
            {"title": "Engineer", "company": "Acme", "from": "2019-03-01", "to": ""}
        )

        self.assertIsNone(dto.to_date)

    def test_null_current_is_false(self):
        dto = EducationRequestDto.model_validate(
            {
                "school": "MIT",
                "degree": "BSc",
                "fieldofstudy": "CS",
                "from": "2014-09-01",
                "current": None,
            }
        )

        self.assertFalse(dto.current)
        self.assertEqual(dto.to_entry()["fieldofstudy"], "CS")

    def test_missing_from_date(self):
        with self.assertRaises(ValidationError):
            EducationRequestDto.model_validate(
                {"school": "MIT", "degree": "BSc", "fieldofstudy": "CS"}
            )


if __name__ == "__main__":
    unittest.main()
