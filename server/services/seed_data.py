"""
Demo scholarship catalog, loaded when the store has no scholarships.
"""
import copy
from typing import Any, Dict, List

UNDERGRAD_ALL = ["undergraduate-freshman", "undergraduate-sophomore", "undergraduate-junior", "undergraduate-senior"]
UNDERGRAD_UPPER = ["undergraduate-sophomore", "undergraduate-junior", "undergraduate-senior"]

SAMPLE_SCHOLARSHIPS: List[Dict[str, Any]] = [
    # Technology
    {
        "title": "Google Computer Science Scholarship",
        "organization": "Google Inc.",
        "amount": "$10,000",
        "deadline": "2025-03-15",
        "description": "Supporting underrepresented students in computer science and technology fields.",
        "requirements": "3.5+ GPA, demonstrated leadership, passion for computer science",
        "tags": ["technology", "computer-science", "diversity", "leadership"],
        "type": "merit-based",
        "eligibilityGpa": "3.5",
        "eligibleFields": ["Computer Science", "Software Engineering", "Information Technology"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    {
        "title": "Microsoft LEAP Engineering Scholarship",
        "organization": "Microsoft Corporation",
        "amount": "$25,000",
        "deadline": "2025-04-01",
        "description": "Full-time internship program for students from non-traditional backgrounds in tech.",
        "requirements": "Enrolled in computer science or related field, strong coding skills",
        "tags": ["technology", "internship", "coding", "diversity"],
        "type": "merit-based",
        "eligibilityGpa": "3.0",
        "eligibleFields": ["Computer Science", "Software Engineering", "Electrical Engineering"],
        "eligibleLevels": ["undergraduate-sophomore", "undergraduate-junior"],
    },
    {
        "title": "Apple WWDC Student Scholarship",
        "organization": "Apple Inc.",
        "amount": "$5,000",
        "deadline": "2025-05-20",
        "description": "Supporting innovative student developers building apps for Apple platforms.",
        "requirements": "App development portfolio, Swift programming skills",
        "tags": ["technology", "mobile-development", "innovation", "apple"],
        "type": "merit-based",
        "eligibilityGpa": "3.0",
        "eligibleFields": ["Computer Science", "Software Engineering", "Mobile Development"],
        "eligibleLevels": UNDERGRAD_ALL,
    },
    # Engineering
    {
        "title": "Society of Women Engineers Scholarship",
        "organization": "Society of Women Engineers",
        "amount": "$15,000",
        "deadline": "2025-02-15",
        "description": "Empowering women in engineering and technology fields.",
        "requirements": "Female student, 3.5+ GPA, engineering major",
        "tags": ["engineering", "women", "stem", "leadership"],
        "type": "merit-based",
        "eligibilityGpa": "3.5",
        "eligibleFields": ["Mechanical Engineering", "Electrical Engineering", "Civil Engineering", "Chemical Engineering"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    {
        "title": "IEEE Foundation Scholarship",
        "organization": "Institute of Electrical and Electronics Engineers",
        "amount": "$8,000",
        "deadline": "2025-03-30",
        "description": "Supporting students pursuing electrical engineering and computer science.",
        "requirements": "IEEE student membership, strong academic performance",
        "tags": ["engineering", "electrical", "ieee", "technology"],
        "type": "merit-based",
        "eligibilityGpa": "3.2",
        "eligibleFields": ["Electrical Engineering", "Computer Engineering", "Computer Science"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    # Business & finance
    {
        "title": "JP Morgan Chase Scholarship",
        "organization": "JP Morgan Chase & Co.",
        "amount": "₹16,50,000",
        "deadline": "2025-04-15",
        "description": "Supporting students pursuing careers in finance and business technology.",
        "requirements": "Business or finance major, 3.3+ GPA, leadership experience",
        "tags": ["finance", "business", "leadership", "banking"],
        "type": "merit-based",
        "eligibilityGpa": "3.3",
        "eligibleFields": ["Business Administration", "Finance", "Economics", "Accounting"],
        "eligibleLevels": ["undergraduate-junior", "undergraduate-senior"],
    },
    {
        "title": "Goldman Sachs Scholarship Program",
        "organization": "Goldman Sachs Group",
        "amount": "₹24,75,000",
        "deadline": "2025-03-01",
        "description": "Comprehensive scholarship program for future finance leaders.",
        "requirements": "Finance or economics major, exceptional academic record, internship experience",
        "tags": ["finance", "investment", "leadership", "economics"],
        "type": "merit-based",
        "eligibilityGpa": "3.7",
        "eligibleFields": ["Finance", "Economics", "Business Administration"],
        "eligibleLevels": ["undergraduate-senior", "graduate-masters"],
    },
    # Healthcare
    {
        "title": "American Medical Association Scholarship",
        "organization": "American Medical Association",
        "amount": "$35,000",
        "deadline": "2025-05-01",
        "description": "Supporting future healthcare professionals and medical researchers.",
        "requirements": "Pre-med or medical student, 3.8+ GPA, healthcare volunteer experience",
        "tags": ["medical", "healthcare", "research", "volunteer"],
        "type": "merit-based",
        "eligibilityGpa": "3.8",
        "eligibleFields": ["Pre-Medicine", "Biology", "Chemistry", "Health Sciences"],
        "eligibleLevels": ["undergraduate-junior", "undergraduate-senior", "graduate-masters"],
    },
    {
        "title": "Johnson & Johnson Nursing Scholarship",
        "organization": "Johnson & Johnson",
        "amount": "$12,000",
        "deadline": "2025-06-15",
        "description": "Supporting the next generation of nursing professionals.",
        "requirements": "Nursing major, 3.5+ GPA, clinical experience",
        "tags": ["nursing", "healthcare", "clinical", "patient-care"],
        "type": "merit-based",
        "eligibilityGpa": "3.5",
        "eligibleFields": ["Nursing", "Health Sciences"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    # Science & environment
    {
        "title": "Environmental Protection Agency Scholarship",
        "organization": "US Environmental Protection Agency",
        "amount": "$18,000",
        "deadline": "2025-04-30",
        "description": "Supporting students committed to environmental protection and sustainability.",
        "requirements": "Environmental science major, 3.4+ GPA, environmental project experience",
        "tags": ["environmental", "sustainability", "science", "climate"],
        "type": "merit-based",
        "eligibilityGpa": "3.4",
        "eligibleFields": ["Environmental Science", "Environmental Engineering", "Biology", "Chemistry"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    {
        "title": "National Science Foundation STEM Scholarship",
        "organization": "National Science Foundation",
        "amount": "$22,000",
        "deadline": "2025-02-28",
        "description": "Advancing STEM education and research across all scientific disciplines.",
        "requirements": "STEM major, 3.6+ GPA, research experience",
        "tags": ["stem", "research", "science", "mathematics"],
        "type": "merit-based",
        "eligibilityGpa": "3.6",
        "eligibleFields": ["Physics", "Chemistry", "Biology", "Mathematics", "Computer Science"],
        "eligibleLevels": ["undergraduate-junior", "undergraduate-senior", "graduate-masters"],
    },
    # International & humanities
    {
        "title": "Fulbright International Exchange Scholarship",
        "organization": "US Department of State",
        "amount": "$40,000",
        "deadline": "2025-10-15",
        "description": "International educational exchange program promoting cultural understanding.",
        "requirements": "Bachelor's degree, strong academic record, language skills",
        "tags": ["international", "cultural-exchange", "languages", "research"],
        "type": "merit-based",
        "eligibilityGpa": "3.5",
        "eligibleFields": ["International Relations", "Languages", "Cultural Studies", "Political Science"],
        "eligibleLevels": ["graduate-masters", "graduate-phd"],
    },
    {
        "title": "Humanities Research Council Grant",
        "organization": "National Humanities Research Council",
        "amount": "$15,000",
        "deadline": "2025-03-20",
        "description": "Supporting innovative research in humanities and social sciences.",
        "requirements": "Humanities major, research proposal, faculty recommendation",
        "tags": ["humanities", "research", "social-sciences", "culture"],
        "type": "merit-based",
        "eligibilityGpa": "3.4",
        "eligibleFields": ["History", "Philosophy", "Literature", "Art History", "Anthropology"],
        "eligibleLevels": ["undergraduate-senior", "graduate-masters"],
    },
    # Need-based
    {
        "title": "First Generation College Student Scholarship",
        "organization": "Educational Foundation",
        "amount": "$8,000",
        "deadline": "2025-07-01",
        "description": "Supporting first-generation college students pursuing higher education.",
        "requirements": "First-generation college student, demonstrated financial need",
        "tags": ["first-generation", "financial-need", "education", "support"],
        "type": "need-based",
        "eligibilityGpa": "2.8",
        "eligibleFields": None,
        "eligibleLevels": UNDERGRAD_ALL,
    },
    {
        "title": "Minority Student Success Fund",
        "organization": "Diversity Education Alliance",
        "amount": "$12,000",
        "deadline": "2025-08-15",
        "description": "Promoting educational equity for underrepresented minority students.",
        "requirements": "Underrepresented minority status, financial need, 3.0+ GPA",
        "tags": ["diversity", "minority", "equity", "financial-aid"],
        "type": "need-based",
        "eligibilityGpa": "3.0",
        "eligibleFields": None,
        "eligibleLevels": UNDERGRAD_ALL,
    },
    # Internships
    {
        "title": "NASA Summer Internship Program",
        "organization": "National Aeronautics and Space Administration",
        "amount": "$7,500",
        "deadline": "2025-01-31",
        "description": "Hands-on internship experience in aerospace engineering and space science.",
        "requirements": "STEM major, 3.0+ GPA, US citizenship",
        "tags": ["internship", "aerospace", "engineering", "space"],
        "type": "internship",
        "eligibilityGpa": "3.0",
        "eligibleFields": ["Aerospace Engineering", "Mechanical Engineering", "Physics", "Computer Science"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    {
        "title": "Meta Software Engineering Internship",
        "organization": "Meta Platforms Inc.",
        "amount": "$12,000",
        "deadline": "2025-02-10",
        "description": "Full-time summer internship building next-generation social technology.",
        "requirements": "Computer science major, strong programming skills, previous internship experience",
        "tags": ["internship", "software", "social-media", "technology"],
        "type": "internship",
        "eligibilityGpa": "3.2",
        "eligibleFields": ["Computer Science", "Software Engineering"],
        "eligibleLevels": ["undergraduate-junior", "undergraduate-senior"],
    },
    {
        "title": "Tesla Engineering Co-op Program",
        "organization": "Tesla Inc.",
        "amount": "$15,000",
        "deadline": "2025-03-05",
        "description": "Six-month co-op program working on sustainable transportation and energy.",
        "requirements": "Engineering major, 3.3+ GPA, passion for sustainability",
        "tags": ["internship", "automotive", "sustainability", "engineering"],
        "type": "internship",
        "eligibilityGpa": "3.3",
        "eligibleFields": ["Mechanical Engineering", "Electrical Engineering", "Chemical Engineering"],
        "eligibleLevels": UNDERGRAD_UPPER,
    },
    {
        "title": "Netflix Content Strategy Internship",
        "organization": "Netflix Inc.",
        "amount": "$8,000",
        "deadline": "2025-04-20",
        "description": "Summer internship in content analysis and entertainment industry strategy.",
        "requirements": "Business, communications, or media studies major, analytical skills",
        "tags": ["internship", "media", "entertainment", "strategy"],
        "type": "internship",
        "eligibilityGpa": "3.1",
        "eligibleFields": ["Business Administration", "Communications", "Media Studies", "Marketing"],
        "eligibleLevels": ["undergraduate-junior", "undergraduate-senior"],
    },
]


def sample_rows() -> List[Dict[str, Any]]:
    """Seed rows with stable string ids '1'..'N' and the active flag set."""
    return [
        {**copy.deepcopy(row), "id": str(index), "isActive": True}
        for index, row in enumerate(SAMPLE_SCHOLARSHIPS, start=1)
    ]
