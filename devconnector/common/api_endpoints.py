PROFILE_ENDPOINT = "/profile"
MY_PROFILE_ENDPOINT = "/profile/me"
PROFILE_BY_USER_ENDPOINT = "/profile/user/{user_id}"

PROFILE_EXPERIENCE_ENDPOINT = "/profile/experience"
PROFILE_EXPERIENCE_ITEM_ENDPOINT = "/profile/experience/{exp_id}"
PROFILE_EDUCATION_ENDPOINT = "/profile/education"
PROFILE_EDUCATION_ITEM_ENDPOINT = "/profile/education/{edu_id}"

PROFILE_GITHUB_ENDPOINT = "/profile/github/{username}"
