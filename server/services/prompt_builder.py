"""
Prompt construction for the AI provider.

Pure functions: (profile, scholarships) -> instruction text. Only the
fields the model needs are embedded; ids, timestamps and ownership data
stay out of the prompt except the scholarship id the model must echo back.
"""
import json
from typing import Any, Dict, List, Optional

PROFILE_FIELDS = [
    "name",
    "educationLevel",
    "fieldOfStudy",
    "gpa",
    "graduationYear",
    "skills",
    "activities",
    "financialNeed",
    "location",
]

SCHOLARSHIP_FIELDS = [
    "id",
    "title",
    "organization",
    "type",
    "amount",
    "deadline",
    "requirements",
    "eligibilityGpa",
    "eligibleFields",
    "eligibleLevels",
    "tags",
    "description",
]


def _profile_view(profile: Dict[str, Any]) -> Dict[str, Any]:
    return {field: profile.get(field) or "Not provided" for field in PROFILE_FIELDS}


def _list_or_any(values: Optional[List[str]]) -> str:
    return ", ".join(values) if values else "Any"


def _scholarship_block(s: Dict[str, Any]) -> str:
    return (
        f"- Scholarship ID: {s.get('id')}\n"
        f"  Title: {s.get('title')}\n"
        f"  Organization: {s.get('organization')}\n"
        f"  Amount: {s.get('amount')}\n"
        f"  Requirements: {s.get('requirements') or 'Not specified'}\n"
        f"  Eligibility: GPA: {s.get('eligibilityGpa') or 'Not specified'}, "
        f"Fields: {_list_or_any(s.get('eligibleFields'))}, "
        f"Levels: {_list_or_any(s.get('eligibleLevels'))}\n"
        f"  Description: {s.get('description')}\n"
    )


def build_match_prompt(profile: Dict[str, Any], scholarships: List[Dict[str, Any]]) -> str:
    """Ask the model to score every scholarship in the list against the profile."""
    scholarships_text = "".join(_scholarship_block(s) for s in scholarships)

    return f"""You are a helpful and detailed scholarship matching AI. Your task is to analyze a student's profile and match them with the most suitable scholarships from a given list.

Student Profile:
{json.dumps(_profile_view(profile), indent=2, ensure_ascii=False)}

List of All Available Scholarships (total {len(scholarships)}):
{scholarships_text}
Instructions:
1. Carefully compare the student's profile against the eligibility and requirements of every scholarship in the list.
2. For each scholarship, assign a matchScore from 0 to 100 based on how well the student fits the criteria. A score of 100 is a perfect match.
3. Provide a concise aiReasoning that explains why the student is or is not a good fit, referencing specific details from both the profile and the scholarship requirements.
4. You must return a match object for ALL {len(scholarships)} scholarships in the list. Do not filter or exclude any scholarship. If a scholarship is not a good fit, give it a low matchScore.

Return the results as a valid JSON array of objects with the keys "scholarshipId", "matchScore" and "aiReasoning". Do not include any extra text or markdown.
"""


def build_guidance_prompt(profile: Dict[str, Any], scholarship: Dict[str, Any]) -> str:
    """Ask the model for application advice for one (profile, scholarship) pair."""
    scholarship_view = {field: scholarship.get(field) for field in SCHOLARSHIP_FIELDS}

    return f"""You are a professional scholarship application advisor.

Student Profile:
{json.dumps(_profile_view(profile), indent=2, ensure_ascii=False)}

Scholarship:
{json.dumps(scholarship_view, indent=2, ensure_ascii=False)}

Provide personalized, actionable guidance for this student applying to this scholarship, in JSON format:
{{
  "essayTips": ["tip1", "tip2"],
  "checklist": ["step1", "step2"],
  "improvementSuggestions": ["suggestion1", "suggestion2"]
}}
Return only the JSON object.
"""
