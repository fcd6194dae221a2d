"""Static visa requirement tables, one entry per (country, visa type).

This is input data, not derived logic: thresholds follow the published 2024
requirements of each programme. Salary and funds amounts are annual gross in
the stated currency. Requirement order is the order breakdowns are reported in.
Countries and visa types are listed in catalog order (used for tie-breaking
in comparisons).
"""

CATALOG_VERSION = "2024.2"

VISA_TABLE: dict[str, dict[str, dict]] = {
    "Germany": {
        "EU Blue Card": {
            "description": "For highly qualified workers from non-EU countries",
            "passing_score": 60,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 25,
                 "hard_fail_cap": 30, "criteria": "Recognized university degree"},
                {"kind": "salary", "required": True, "min_amount": 45300, "currency": "EUR",
                 "alternate_min_for_shortage_occupation": 41041.80, "weight": 30,
                 "hard_fail_cap": 40, "criteria": "Minimum gross annual salary"},
                {"kind": "job_offer", "required": True, "weight": 25, "hard_fail_cap": 40,
                 "criteria": "Binding job offer from a German employer"},
                {"kind": "experience", "required": False, "min_years": 0, "bonus_years": 3,
                 "weight": 10, "criteria": "3+ years relevant experience is advantageous"},
                {"kind": "language", "required": False, "min_level": "B1", "weight": 10,
                 "accepted_languages": ["German", "English"],
                 "criteria": "German language skills recommended"},
            ],
            "official_sources": [
                {"title": "German Federal Foreign Office - EU Blue Card",
                 "url": "https://www.auswaertiges-amt.de/en/visa-service/buergerservice/faq/17-eu-blue-card/606706",
                 "relevance": "Official visa requirements"},
                {"title": "Make it in Germany - EU Blue Card",
                 "url": "https://www.make-it-in-germany.com/en/visa-residence/types/eu-blue-card",
                 "relevance": "Eligibility criteria"},
            ],
        },
        "Job Seeker Visa": {
            "description": "Six months in Germany to look for qualified employment",
            "passing_score": 60,
            "purposes": ["Work - Job Seeking"],
            "required_documents": ["resume", "degree", "financial_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 35,
                 "hard_fail_cap": 35, "criteria": "Recognized university degree"},
                {"kind": "experience", "required": False, "min_years": 0, "bonus_years": 5,
                 "weight": 25, "criteria": "5 years professional experience recommended"},
                {"kind": "financial_proof", "required": True, "min_amount": 11208, "currency": "EUR",
                 "weight": 20, "criteria": "Funds to cover living costs during the stay"},
                {"kind": "language", "required": False, "min_level": "B1", "weight": 20,
                 "accepted_languages": ["German", "English"],
                 "criteria": "German or English proficiency"},
            ],
            "official_sources": [
                {"title": "Make it in Germany - Job Seeker Visa",
                 "url": "https://www.make-it-in-germany.com/en/visa-residence/types/job-search",
                 "relevance": "Official visa requirements"},
            ],
        },
        "ICT Permit": {
            "description": "Intra-corporate transfer for specialists and managers",
            "passing_score": 65,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 25,
                 "criteria": "Assignment letter from the sending company"},
                {"kind": "occupation", "required": True, "weight": 20,
                 "listed_occupations": ["manager", "specialist", "director", "lead", "head", "architect"],
                 "criteria": "Specialist or managerial position"},
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 20,
                 "criteria": "University degree or equivalent qualification"},
                {"kind": "salary", "required": True, "min_amount": 41041.80, "currency": "EUR",
                 "weight": 25, "criteria": "Salary comparable to German employees"},
                {"kind": "experience", "required": True, "min_years": 3, "bonus_years": 3,
                 "weight": 10, "criteria": "Minimum 3 years professional experience"},
            ],
            "official_sources": [
                {"title": "BAMF - Intra-corporate transfer",
                 "url": "https://www.bamf.de/EN/Themen/MigrationAufenthalt/ZuwandererDrittstaaten/Arbeit/UnternehmensinternTransfer/unternehmensintern-transfer-node.html",
                 "relevance": "ICT permit requirements"},
            ],
        },
        "Skilled Workers Visa": {
            "description": "For qualified professionals with vocational training or a degree",
            "passing_score": 60,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "degree", "job_offer"],
            "optional_documents": ["language_certificate", "salary_proof"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "diploma", "weight": 30,
                 "hard_fail_cap": 35, "criteria": "Recognized vocational training or degree"},
                {"kind": "job_offer", "required": True, "weight": 30, "hard_fail_cap": 40,
                 "criteria": "Concrete job offer"},
                {"kind": "language", "required": False, "min_level": "A2", "weight": 15,
                 "accepted_languages": ["German"], "criteria": "German language skills"},
                {"kind": "experience", "required": False, "min_years": 0, "bonus_years": 2,
                 "weight": 15, "criteria": "Relevant professional experience"},
                {"kind": "age", "required": False, "min_age": 18, "max_age": 45,
                 "optimal_min": 18, "optimal_max": 44, "weight": 10,
                 "criteria": "Applicants over 45 must show adequate pension provision"},
            ],
            "official_sources": [
                {"title": "Make it in Germany - Skilled workers",
                 "url": "https://www.make-it-in-germany.com/en/visa-residence/types/work-qualified-professionals",
                 "relevance": "Official visa requirements"},
            ],
        },
        "Opportunity Card": {
            "description": "Points-based card for job seeking (Chancenkarte)",
            "passing_score": 60,
            "purposes": ["Work - Job Seeking", "Skilled Migration"],
            "required_documents": ["resume", "degree", "financial_proof", "language_certificate"],
            "optional_documents": [],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "diploma", "weight": 25,
                 "criteria": "Vocational qualification or degree"},
                {"kind": "language", "required": True, "min_level": "A1", "weight": 20,
                 "criteria": "Basic German (A1) or English (B2)"},
                {"kind": "experience", "required": False, "min_years": 2, "bonus_years": 3,
                 "weight": 20, "criteria": "Points for recent professional experience"},
                {"kind": "age", "required": False, "min_age": 18, "max_age": 40,
                 "optimal_min": 18, "optimal_max": 35, "weight": 15,
                 "criteria": "Points for applicants under 35"},
                {"kind": "financial_proof", "required": True, "min_amount": 12324, "currency": "EUR",
                 "weight": 20, "criteria": "Proof of means of subsistence"},
            ],
            "official_sources": [
                {"title": "Make it in Germany - Opportunity Card",
                 "url": "https://www.make-it-in-germany.com/en/visa-residence/types/job-search-opportunity-card",
                 "relevance": "Points system"},
            ],
        },
        "Student Visa": {
            "description": "For pursuing higher education at German universities",
            "passing_score": 60,
            "purposes": ["Bachelor's Degree Study", "Master's Degree Study", "PhD/Research"],
            "required_documents": ["passport", "degree", "financial_proof", "language_certificate"],
            "optional_documents": ["resume"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 35,
                 "criteria": "Higher education entrance qualification"},
                {"kind": "financial_proof", "required": True, "min_amount": 11208, "currency": "EUR",
                 "weight": 35, "hard_fail_cap": 40, "criteria": "Blocked account for living costs"},
                {"kind": "language", "required": True, "min_level": "B1", "weight": 30,
                 "accepted_languages": ["German", "English"],
                 "criteria": "Language of instruction at B1-C1 depending on programme"},
            ],
            "official_sources": [
                {"title": "Study in Germany - Visa",
                 "url": "https://www.study-in-germany.de/en/plan-your-studies/requirements/visa/",
                 "relevance": "Student visa requirements"},
            ],
        },
        "Freelance Visa": {
            "description": "Self-employment as a freelancer in a liberal profession",
            "passing_score": 60,
            "purposes": ["Business/Entrepreneurship"],
            "required_documents": ["resume", "degree", "financial_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "education", "required": False, "min_level": "bachelors", "weight": 25,
                 "criteria": "Professional qualification for the freelance activity"},
                {"kind": "experience", "required": True, "min_years": 2, "bonus_years": 3,
                 "weight": 30, "criteria": "Track record in the field"},
                {"kind": "financial_proof", "required": True, "min_amount": 12000, "currency": "EUR",
                 "weight": 30, "criteria": "Financial viability of the activity"},
                {"kind": "age", "required": False, "min_age": 18, "max_age": 45,
                 "optimal_min": 18, "optimal_max": 44, "weight": 15,
                 "criteria": "Applicants over 45 must show pension provision"},
            ],
            "official_sources": [
                {"title": "Make it in Germany - Self-employment",
                 "url": "https://www.make-it-in-germany.com/en/visa-residence/types/self-employment",
                 "relevance": "Freelance requirements"},
            ],
        },
    },
    "Canada": {
        "Express Entry": {
            "description": "Points-based immigration system for skilled workers",
            "passing_score": 67,
            "purposes": ["Skilled Migration"],
            "required_documents": ["resume", "degree", "language_certificate"],
            "optional_documents": ["job_offer"],
            "requirements": [
                {"kind": "age", "required": True, "min_age": 18, "max_age": 45,
                 "optimal_min": 20, "optimal_max": 29, "weight": 12,
                 "criteria": "Points decrease after age 29"},
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 25,
                 "criteria": "Educational Credential Assessment required"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 28,
                 "accepted_languages": ["English", "French"], "hard_fail_cap": 40,
                 "criteria": "Minimum CLB 7 in English or French"},
                {"kind": "experience", "required": True, "min_years": 1, "bonus_years": 3,
                 "weight": 25, "criteria": "Skilled work experience in NOC TEER 0-3"},
                {"kind": "job_offer", "required": False, "weight": 10,
                 "criteria": "Valid job offer adds CRS points"},
            ],
            "official_sources": [
                {"title": "IRCC Express Entry",
                 "url": "https://www.canada.ca/en/immigration-refugees-citizenship/services/immigrate-canada/express-entry.html",
                 "relevance": "Official Express Entry requirements"},
                {"title": "CRS Calculator",
                 "url": "https://www.cic.gc.ca/english/immigrate/skilled/crs-tool.asp",
                 "relevance": "Points calculation tool"},
            ],
        },
        "Study Permit": {
            "description": "Study at a designated learning institution",
            "passing_score": 60,
            "purposes": ["Bachelor's Degree Study", "Master's Degree Study", "PhD/Research"],
            "required_documents": ["passport", "financial_proof", "language_certificate"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 40,
                 "criteria": "Letter of acceptance from a DLI"},
                {"kind": "financial_proof", "required": True, "min_amount": 20635, "currency": "CAD",
                 "weight": 30, "criteria": "Funds for tuition and living costs"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 20,
                 "accepted_languages": ["English", "French"], "criteria": "IELTS 6.0 or equivalent"},
                {"kind": "age", "required": False, "min_age": 16, "max_age": 60,
                 "optimal_min": 17, "optimal_max": 35, "weight": 10,
                 "criteria": "Study plan consistent with background"},
            ],
            "official_sources": [
                {"title": "IRCC Study Permit",
                 "url": "https://www.canada.ca/en/immigration-refugees-citizenship/services/study-canada/study-permit.html",
                 "relevance": "Official requirements"},
            ],
        },
        "Global Talent Stream": {
            "description": "Fast-track work permits for highly skilled tech talent",
            "passing_score": 65,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer", "salary_proof"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 30, "hard_fail_cap": 40,
                 "criteria": "Offer from a designated employer"},
                {"kind": "occupation", "required": True, "weight": 25,
                 "listed_occupations": ["software", "developer", "engineer", "data", "architect",
                                        "analyst", "designer", "product manager", "devops"],
                 "criteria": "Occupation on the Global Talent list"},
                {"kind": "salary", "required": True, "min_amount": 80000, "currency": "CAD",
                 "weight": 25, "criteria": "Prevailing wage for the occupation"},
                {"kind": "experience", "required": False, "min_years": 2, "bonus_years": 3,
                 "weight": 20, "criteria": "Specialized experience"},
            ],
            "official_sources": [
                {"title": "Global Talent Stream",
                 "url": "https://www.canada.ca/en/employment-social-development/services/foreign-workers/global-talent.html",
                 "relevance": "Program requirements"},
            ],
        },
        "Temporary Foreign Worker Program": {
            "description": "Employer-specific work permit backed by an LMIA",
            "passing_score": 60,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer"],
            "optional_documents": ["degree", "language_certificate"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 40, "hard_fail_cap": 35,
                 "criteria": "Job offer with positive LMIA"},
                {"kind": "experience", "required": False, "min_years": 1, "bonus_years": 2,
                 "weight": 25, "criteria": "Experience for the offered role"},
                {"kind": "education", "required": False, "min_level": "highschool", "weight": 15,
                 "criteria": "Qualifications for the offered role"},
                {"kind": "language", "required": False, "min_level": "B1", "weight": 20,
                 "accepted_languages": ["English", "French"], "criteria": "Working language ability"},
            ],
            "official_sources": [
                {"title": "Temporary Foreign Worker Program",
                 "url": "https://www.canada.ca/en/employment-social-development/services/foreign-workers.html",
                 "relevance": "Program overview"},
            ],
        },
    },
    "Ireland": {
        "Critical Skills Employment Permit": {
            "description": "For skilled workers in occupations with labour shortages",
            "passing_score": 60,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 30, "hard_fail_cap": 40,
                 "criteria": "Two-year job offer"},
                {"kind": "salary", "required": True, "min_amount": 38000, "currency": "EUR",
                 "alternate_min_for_shortage_occupation": 32000, "weight": 30, "hard_fail_cap": 45,
                 "criteria": "EUR 32,000 for listed occupations, EUR 64,000 otherwise"},
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 25,
                 "criteria": "Degree relevant to the job"},
                {"kind": "experience", "required": False, "min_years": 0, "bonus_years": 2,
                 "weight": 15, "criteria": "Relevant experience recommended"},
            ],
            "official_sources": [
                {"title": "Critical Skills Employment Permit",
                 "url": "https://enterprise.gov.ie/en/What-We-Do/Workplace-and-Skills/Employment-Permits/Permit-Types/Critical-Skills-Employment-Permit/",
                 "relevance": "Official requirements"},
                {"title": "Critical Skills Occupations List",
                 "url": "https://enterprise.gov.ie/en/what-we-do/workplace-and-skills/employment-permits/employment-permit-eligibility/critical-skills-occupations-list/",
                 "relevance": "Eligible occupations list"},
            ],
        },
        "General Employment Permit": {
            "description": "For occupations not on the ineligible list",
            "passing_score": 60,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer", "salary_proof"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 35, "hard_fail_cap": 40,
                 "criteria": "Job offer passing the labour market needs test"},
                {"kind": "salary", "required": True, "min_amount": 34000, "currency": "EUR",
                 "weight": 30, "hard_fail_cap": 45, "criteria": "Minimum annual remuneration"},
                {"kind": "education", "required": False, "min_level": "diploma", "weight": 15,
                 "criteria": "Qualifications for the role"},
                {"kind": "experience", "required": False, "min_years": 1, "bonus_years": 3,
                 "weight": 20, "criteria": "Relevant experience"},
            ],
            "official_sources": [
                {"title": "General Employment Permit",
                 "url": "https://enterprise.gov.ie/en/what-we-do/workplace-and-skills/employment-permits/permit-types/general-employment-permit/",
                 "relevance": "Official requirements"},
            ],
        },
        "Study Visa": {
            "description": "Long-stay study visa (Type D)",
            "passing_score": 60,
            "purposes": ["Bachelor's Degree Study", "Master's Degree Study", "PhD/Research"],
            "required_documents": ["passport", "financial_proof", "language_certificate"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 35,
                 "criteria": "Acceptance on a full-time course"},
                {"kind": "financial_proof", "required": True, "min_amount": 10000, "currency": "EUR",
                 "weight": 35, "criteria": "Fees plus EUR 10,000 living costs"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 30,
                 "accepted_languages": ["English"], "criteria": "English test for the course"},
            ],
            "official_sources": [
                {"title": "Irish Immigration - Study",
                 "url": "https://www.irishimmigration.ie/coming-to-study-in-ireland/",
                 "relevance": "Study visa requirements"},
            ],
        },
    },
    "Netherlands": {
        "Highly Skilled Migrant": {
            "description": "Residence permit for highly skilled migrants (Kennismigrant)",
            "passing_score": 65,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer", "salary_proof"],
            "optional_documents": ["degree", "language_certificate"],
            "requirements": [
                {"kind": "salary", "required": True, "min_amount": 58080, "currency": "EUR",
                 "young_applicant_min_amount": 42588, "young_applicant_max_age": 29,
                 "weight": 35, "hard_fail_cap": 40,
                 "criteria": "Age-dependent minimum salary"},
                {"kind": "job_offer", "required": True, "sponsor_required": True, "weight": 35,
                 "hard_fail_cap": 40, "criteria": "Employer must be a recognised sponsor"},
                {"kind": "education", "required": False, "min_level": "bachelors", "weight": 15,
                 "criteria": "Higher education advantageous"},
                {"kind": "experience", "required": False, "min_years": 0, "bonus_years": 3,
                 "weight": 15, "criteria": "Relevant experience advantageous"},
            ],
            "official_sources": [
                {"title": "IND - Highly skilled migrant",
                 "url": "https://ind.nl/en/residence-permits/work/highly-skilled-migrant",
                 "relevance": "Official requirements"},
            ],
        },
        "EU Blue Card": {
            "description": "European Blue Card for highly educated workers",
            "passing_score": 60,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": [],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 30,
                 "hard_fail_cap": 30, "criteria": "Higher education of at least 3 years"},
                {"kind": "salary", "required": True, "min_amount": 61200, "currency": "EUR",
                 "weight": 35, "hard_fail_cap": 40, "criteria": "Blue Card salary criterion"},
                {"kind": "job_offer", "required": True, "weight": 35, "hard_fail_cap": 40,
                 "criteria": "Employment contract of at least 6 months"},
            ],
            "official_sources": [
                {"title": "IND - European Blue Card",
                 "url": "https://ind.nl/en/residence-permits/work/european-blue-card",
                 "relevance": "Official requirements"},
            ],
        },
        "Orientation Year": {
            "description": "Search year for recent graduates of top universities",
            "passing_score": 60,
            "purposes": ["Work - Job Seeking"],
            "required_documents": ["degree", "financial_proof"],
            "optional_documents": ["resume"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "masters", "weight": 50,
                 "hard_fail_cap": 30, "criteria": "Master's or PhD within the last 3 years"},
                {"kind": "financial_proof", "required": True, "min_amount": 8000, "currency": "EUR",
                 "weight": 25, "criteria": "Sufficient means of support"},
                {"kind": "language", "required": False, "min_level": "B2", "weight": 25,
                 "accepted_languages": ["English", "Dutch"], "criteria": "Working language ability"},
            ],
            "official_sources": [
                {"title": "IND - Orientation year",
                 "url": "https://ind.nl/en/residence-permits/work/residence-permit-for-search-year-highly-educated-persons",
                 "relevance": "Official requirements"},
            ],
        },
    },
    "Australia": {
        "Skilled Independent (189)": {
            "description": "Points-tested permanent visa for skilled workers",
            "passing_score": 65,
            "purposes": ["Skilled Migration"],
            "required_documents": ["resume", "degree", "language_certificate", "passport"],
            "optional_documents": ["job_offer"],
            "requirements": [
                {"kind": "age", "required": True, "min_age": 18, "max_age": 44,
                 "optimal_min": 25, "optimal_max": 32, "weight": 15, "hard_fail_cap": 20,
                 "criteria": "Under 45 at invitation; 25-32 scores highest"},
                {"kind": "education", "required": True, "min_level": "diploma", "weight": 20,
                 "criteria": "Higher qualifications earn more points"},
                {"kind": "experience", "required": True, "min_years": 3, "bonus_years": 5,
                 "weight": 20, "criteria": "Skilled employment experience"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 20,
                 "accepted_languages": ["English"], "hard_fail_cap": 35,
                 "criteria": "Competent English (IELTS 6.0) minimum"},
                {"kind": "occupation", "required": True, "weight": 25,
                 "listed_occupations": ["engineer", "developer", "nurse", "accountant", "teacher",
                                        "analyst", "architect", "electrician", "physician", "doctor"],
                 "criteria": "Occupation on the skilled list with positive assessment"},
            ],
            "official_sources": [
                {"title": "Skilled Independent visa (subclass 189)",
                 "url": "https://immi.homeaffairs.gov.au/visas/getting-a-visa/visa-listing/skilled-independent-189",
                 "relevance": "Official visa requirements"},
            ],
        },
        "Skilled Nominated (190)": {
            "description": "Points-tested visa with state nomination",
            "passing_score": 65,
            "purposes": ["Skilled Migration"],
            "required_documents": ["resume", "degree", "language_certificate", "passport"],
            "optional_documents": ["job_offer"],
            "requirements": [
                {"kind": "age", "required": True, "min_age": 18, "max_age": 44,
                 "optimal_min": 25, "optimal_max": 32, "weight": 15, "hard_fail_cap": 20,
                 "criteria": "Under 45 at invitation"},
                {"kind": "education", "required": True, "min_level": "diploma", "weight": 20,
                 "criteria": "Recognized qualification"},
                {"kind": "experience", "required": False, "min_years": 3, "bonus_years": 5,
                 "weight": 20, "criteria": "Skilled employment experience"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 20,
                 "accepted_languages": ["English"], "criteria": "Competent English"},
                {"kind": "occupation", "required": True, "weight": 25,
                 "listed_occupations": ["engineer", "developer", "nurse", "accountant", "teacher",
                                        "analyst", "electrician", "chef", "carpenter"],
                 "criteria": "Occupation on a state nomination list"},
            ],
            "official_sources": [
                {"title": "Skilled Nominated visa (subclass 190)",
                 "url": "https://immi.homeaffairs.gov.au/visas/getting-a-visa/visa-listing/skilled-nominated-190",
                 "relevance": "Official visa requirements"},
            ],
        },
        "Temporary Skill Shortage (482)": {
            "description": "Employer-sponsored temporary skilled visa",
            "passing_score": 60,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer", "language_certificate"],
            "optional_documents": ["degree", "salary_proof"],
            "requirements": [
                {"kind": "job_offer", "required": True, "sponsor_required": True, "weight": 30,
                 "hard_fail_cap": 35, "criteria": "Nomination by an approved sponsor"},
                {"kind": "experience", "required": True, "min_years": 2, "bonus_years": 3,
                 "weight": 25, "criteria": "2 years relevant work experience"},
                {"kind": "language", "required": True, "min_level": "B1", "weight": 15,
                 "accepted_languages": ["English"], "criteria": "IELTS 5.0 overall"},
                {"kind": "salary", "required": True, "min_amount": 73150, "currency": "AUD",
                 "weight": 20, "criteria": "Temporary skilled migration income threshold"},
                {"kind": "occupation", "required": False, "weight": 10,
                 "listed_occupations": ["engineer", "developer", "nurse", "chef", "mechanic",
                                        "accountant", "analyst", "electrician"],
                 "criteria": "Occupation on the skills list"},
            ],
            "official_sources": [
                {"title": "Temporary Skill Shortage visa (subclass 482)",
                 "url": "https://immi.homeaffairs.gov.au/visas/getting-a-visa/visa-listing/temporary-skill-shortage-482",
                 "relevance": "Official visa requirements"},
            ],
        },
        "Student Visa (500)": {
            "description": "Full-time study at a registered institution",
            "passing_score": 60,
            "purposes": ["Bachelor's Degree Study", "Master's Degree Study", "PhD/Research"],
            "required_documents": ["passport", "financial_proof", "language_certificate"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 35,
                 "criteria": "Confirmation of enrolment"},
                {"kind": "financial_proof", "required": True, "min_amount": 29710, "currency": "AUD",
                 "weight": 35, "criteria": "Funds for 12 months living costs"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 30,
                 "accepted_languages": ["English"], "criteria": "IELTS 5.5+ or equivalent"},
            ],
            "official_sources": [
                {"title": "Student visa (subclass 500)",
                 "url": "https://immi.homeaffairs.gov.au/visas/getting-a-visa/visa-listing/student-500",
                 "relevance": "Official visa requirements"},
            ],
        },
    },
    "Poland": {
        "Work Permit Type A": {
            "description": "Work for an employer based in Poland",
            "passing_score": 55,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer"],
            "optional_documents": ["degree", "language_certificate", "salary_proof"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 35, "hard_fail_cap": 35,
                 "criteria": "Employer must obtain the permit"},
                {"kind": "salary", "required": False, "min_amount": 51600, "currency": "PLN",
                 "weight": 20, "criteria": "Remuneration not lower than comparable staff"},
                {"kind": "experience", "required": False, "min_years": 1, "bonus_years": 3,
                 "weight": 20, "criteria": "Relevant work experience"},
                {"kind": "education", "required": False, "min_level": "diploma", "weight": 15,
                 "criteria": "Qualifications for the role"},
                {"kind": "language", "required": False, "min_level": "A2", "weight": 10,
                 "accepted_languages": ["Polish", "English"], "criteria": "Polish or English"},
            ],
            "official_sources": [
                {"title": "Poland work permits",
                 "url": "https://www.gov.pl/web/udsc-en/work-permit",
                 "relevance": "Work permit requirements"},
            ],
        },
        "Work Permit Type C": {
            "description": "For foreign nationals delegated to a Polish branch",
            "passing_score": 55,
            "purposes": ["Work - Job Offer", "Internship/Training"],
            "required_documents": ["resume", "job_offer", "degree"],
            "optional_documents": ["language_certificate", "salary_proof"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 30,
                 "criteria": "Delegation by a foreign employer"},
                {"kind": "education", "required": False, "min_level": "bachelors", "weight": 25,
                 "criteria": "Degree beneficial but not mandatory"},
                {"kind": "experience", "required": False, "min_years": 1, "bonus_years": 3,
                 "weight": 20, "criteria": "Relevant work experience"},
                {"kind": "salary", "required": False, "min_amount": 48000, "currency": "PLN",
                 "weight": 15, "criteria": "Competitive salary"},
                {"kind": "language", "required": False, "min_level": "A2", "weight": 10,
                 "criteria": "Polish or English proficiency"},
            ],
            "official_sources": [
                {"title": "Poland work permits",
                 "url": "https://www.gov.pl/web/udsc-en/work-permit",
                 "relevance": "Work permit requirements"},
            ],
        },
        "EU Blue Card": {
            "description": "Blue Card for highly qualified employment in Poland",
            "passing_score": 60,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": [],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 30,
                 "hard_fail_cap": 30, "criteria": "Higher education"},
                {"kind": "salary", "required": True, "min_amount": 130000, "currency": "PLN",
                 "weight": 35, "hard_fail_cap": 40, "criteria": "1.5x average gross salary"},
                {"kind": "job_offer", "required": True, "weight": 35, "hard_fail_cap": 40,
                 "criteria": "Contract of at least 6 months"},
            ],
            "official_sources": [
                {"title": "Poland - EU Blue Card",
                 "url": "https://www.gov.pl/web/udsc-en/eu-blue-card",
                 "relevance": "Official requirements"},
            ],
        },
    },
    "France": {
        "Talent Passport": {
            "description": "Multi-year permit for qualified employees",
            "passing_score": 70,
            "purposes": ["Work - Job Offer", "Skilled Migration", "Business/Entrepreneurship"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "salary", "required": True, "min_amount": 39582, "currency": "EUR",
                 "weight": 30, "hard_fail_cap": 40, "criteria": "Twice the minimum wage"},
                {"kind": "education", "required": True, "min_level": "masters", "weight": 25,
                 "criteria": "Master's degree or 5 years experience"},
                {"kind": "experience", "required": False, "min_years": 5, "bonus_years": 3,
                 "weight": 20, "criteria": "5 years can substitute for the master's"},
                {"kind": "job_offer", "required": True, "weight": 25, "hard_fail_cap": 40,
                 "criteria": "Employment contract of at least 12 months"},
            ],
            "official_sources": [
                {"title": "Talent Passport",
                 "url": "https://france-visas.gouv.fr/en/web/france-visas/talent-passport",
                 "relevance": "Official requirements"},
            ],
        },
        "EU Blue Card": {
            "description": "Talent Passport - EU Blue Card",
            "passing_score": 60,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": [],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 30,
                 "hard_fail_cap": 30, "criteria": "3-year higher education or 5 years experience"},
                {"kind": "salary", "required": True, "min_amount": 53836, "currency": "EUR",
                 "weight": 35, "hard_fail_cap": 40, "criteria": "1.5x average salary"},
                {"kind": "job_offer", "required": True, "weight": 35, "hard_fail_cap": 40,
                 "criteria": "Contract of at least 12 months"},
            ],
            "official_sources": [
                {"title": "France Visas - EU Blue Card",
                 "url": "https://france-visas.gouv.fr/en/web/france-visas/talent-passport",
                 "relevance": "Official requirements"},
            ],
        },
        "Long-Stay Student Visa": {
            "description": "VLS-TS for studies of more than 3 months",
            "passing_score": 60,
            "purposes": ["Bachelor's Degree Study", "Master's Degree Study", "PhD/Research"],
            "required_documents": ["passport", "financial_proof"],
            "optional_documents": ["language_certificate", "degree"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 40,
                 "criteria": "Admission to a French institution"},
                {"kind": "financial_proof", "required": True, "min_amount": 7380, "currency": "EUR",
                 "weight": 35, "criteria": "EUR 615 per month"},
                {"kind": "language", "required": False, "min_level": "B2", "weight": 25,
                 "accepted_languages": ["French", "English"], "criteria": "Language of instruction"},
            ],
            "official_sources": [
                {"title": "Campus France",
                 "url": "https://www.campusfrance.org/en/student-visa-france",
                 "relevance": "Student visa requirements"},
            ],
        },
    },
    "Italy": {
        "Highly Qualified Worker Visa": {
            "description": "EU Blue Card equivalent for Italy",
            "passing_score": 65,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "degree", "job_offer", "salary_proof"],
            "optional_documents": ["language_certificate"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 25,
                 "hard_fail_cap": 35, "criteria": "3-year university qualification"},
                {"kind": "salary", "required": True, "min_amount": 27310, "currency": "EUR",
                 "weight": 30, "hard_fail_cap": 40, "criteria": "Minimum salary threshold"},
                {"kind": "job_offer", "required": True, "weight": 25, "hard_fail_cap": 40,
                 "criteria": "Employment contract of at least 12 months"},
                {"kind": "experience", "required": False, "min_years": 5, "bonus_years": 3,
                 "weight": 20, "criteria": "5 years experience can substitute the degree"},
            ],
            "official_sources": [
                {"title": "Visto per Italia",
                 "url": "https://vistoperitalia.esteri.it/home/en",
                 "relevance": "Official visa portal"},
            ],
        },
        "Subordinate Work Visa": {
            "description": "Salaried employment within the annual quota (Decreto Flussi)",
            "passing_score": 55,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer"],
            "optional_documents": ["degree", "language_certificate"],
            "requirements": [
                {"kind": "job_offer", "required": True, "weight": 40, "hard_fail_cap": 35,
                 "criteria": "Nulla osta obtained by the employer"},
                {"kind": "experience", "required": False, "min_years": 1, "bonus_years": 3,
                 "weight": 25, "criteria": "Relevant experience"},
                {"kind": "education", "required": False, "min_level": "highschool", "weight": 15,
                 "criteria": "Qualifications for the role"},
                {"kind": "language", "required": False, "min_level": "A2", "weight": 20,
                 "accepted_languages": ["Italian", "English"], "criteria": "Basic Italian helpful"},
            ],
            "official_sources": [
                {"title": "Visto per Italia",
                 "url": "https://vistoperitalia.esteri.it/home/en",
                 "relevance": "Official visa portal"},
            ],
        },
    },
    "UK": {
        "Skilled Worker Visa": {
            "description": "Points-based visa for skilled workers",
            "passing_score": 70,
            "purposes": ["Work - Job Offer", "Skilled Migration"],
            "required_documents": ["resume", "job_offer", "language_certificate"],
            "optional_documents": ["degree", "salary_proof"],
            "requirements": [
                {"kind": "job_offer", "required": True, "sponsor_required": True, "weight": 30,
                 "hard_fail_cap": 40, "criteria": "Certificate of sponsorship from a licensed sponsor"},
                {"kind": "salary", "required": True, "min_amount": 38700, "currency": "GBP",
                 "alternate_min_for_shortage_occupation": 30960, "weight": 25, "hard_fail_cap": 45,
                 "criteria": "General threshold or going rate"},
                {"kind": "occupation", "required": True, "weight": 20,
                 "listed_occupations": ["engineer", "developer", "programmer", "nurse", "analyst",
                                        "architect", "scientist", "manager", "teacher", "accountant"],
                 "criteria": "Job at RQF level 6 or above"},
                {"kind": "language", "required": True, "min_level": "B1", "weight": 15,
                 "accepted_languages": ["English"], "criteria": "English at CEFR B1"},
                {"kind": "education", "required": False, "min_level": "bachelors", "weight": 10,
                 "criteria": "Relevant PhD earns tradeable points"},
            ],
            "official_sources": [
                {"title": "UK Skilled Worker visa",
                 "url": "https://www.gov.uk/skilled-worker-visa",
                 "relevance": "Official requirements"},
            ],
        },
        "Health and Care Worker Visa": {
            "description": "Skilled Worker route for eligible health and care roles",
            "passing_score": 65,
            "purposes": ["Work - Job Offer"],
            "required_documents": ["resume", "job_offer", "language_certificate"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "job_offer", "required": True, "sponsor_required": True, "weight": 30,
                 "hard_fail_cap": 40, "criteria": "Offer from NHS or approved care employer"},
                {"kind": "occupation", "required": True, "weight": 25,
                 "listed_occupations": ["nurse", "doctor", "physician", "midwife", "paramedic",
                                        "care worker", "pharmacist", "therapist"],
                 "criteria": "Eligible health or care occupation"},
                {"kind": "salary", "required": True, "min_amount": 23200, "currency": "GBP",
                 "weight": 20, "criteria": "Health and care salary threshold"},
                {"kind": "language", "required": True, "min_level": "B1", "weight": 15,
                 "accepted_languages": ["English"], "criteria": "English at CEFR B1"},
                {"kind": "education", "required": False, "min_level": "diploma", "weight": 10,
                 "criteria": "Professional registration and qualifications"},
            ],
            "official_sources": [
                {"title": "Health and Care Worker visa",
                 "url": "https://www.gov.uk/health-care-worker-visa",
                 "relevance": "Official requirements"},
            ],
        },
        "Graduate Visa": {
            "description": "Stay after successfully completing a UK degree",
            "passing_score": 60,
            "purposes": ["Work - Job Seeking"],
            "required_documents": ["degree", "passport"],
            "optional_documents": ["resume"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "bachelors", "weight": 70,
                 "hard_fail_cap": 25, "criteria": "UK degree completed on a Student visa"},
                {"kind": "language", "required": False, "min_level": "B2", "weight": 30,
                 "accepted_languages": ["English"], "criteria": "Assessed during studies"},
            ],
            "official_sources": [
                {"title": "Graduate visa",
                 "url": "https://www.gov.uk/graduate-visa",
                 "relevance": "Official requirements"},
            ],
        },
        "Global Talent Visa": {
            "description": "For leaders or potential leaders in academia, research, arts or digital tech",
            "passing_score": 65,
            "purposes": ["Skilled Migration", "PhD/Research"],
            "required_documents": ["resume", "degree"],
            "optional_documents": ["job_offer"],
            "requirements": [
                {"kind": "education", "required": False, "min_level": "masters", "weight": 30,
                 "criteria": "Advanced degrees support an endorsement"},
                {"kind": "experience", "required": True, "min_years": 5, "bonus_years": 5,
                 "weight": 40, "criteria": "Track record of exceptional talent or promise"},
                {"kind": "occupation", "required": True, "weight": 30,
                 "listed_occupations": ["researcher", "scientist", "professor", "engineer",
                                        "developer", "artist", "architect", "designer"],
                 "criteria": "Field covered by an endorsing body"},
            ],
            "official_sources": [
                {"title": "Global Talent visa",
                 "url": "https://www.gov.uk/global-talent",
                 "relevance": "Official requirements"},
            ],
        },
        "Student Visa": {
            "description": "Study at a licensed student sponsor",
            "passing_score": 60,
            "purposes": ["Bachelor's Degree Study", "Master's Degree Study", "PhD/Research"],
            "required_documents": ["passport", "financial_proof", "language_certificate"],
            "optional_documents": ["degree"],
            "requirements": [
                {"kind": "education", "required": True, "min_level": "highschool", "weight": 35,
                 "criteria": "Confirmation of acceptance for studies"},
                {"kind": "financial_proof", "required": True, "min_amount": 12006, "currency": "GBP",
                 "weight": 35, "criteria": "Living costs for 9 months"},
                {"kind": "language", "required": True, "min_level": "B2", "weight": 30,
                 "accepted_languages": ["English"], "criteria": "English at B2 for degree level"},
            ],
            "official_sources": [
                {"title": "Student visa",
                 "url": "https://www.gov.uk/student-visa",
                 "relevance": "Official requirements"},
            ],
        },
    },
}

# Used when a (country, visa type) pair is not modelled above.
DEFAULT_REQUIREMENTS: list[dict] = [
    {"kind": "education", "required": False, "min_level": "bachelors", "weight": 20,
     "criteria": "Formal qualifications"},
    {"kind": "experience", "required": False, "min_years": 0, "bonus_years": 3, "weight": 20,
     "criteria": "Professional experience"},
    {"kind": "language", "required": False, "min_level": "B1", "weight": 20,
     "criteria": "Language proficiency"},
    {"kind": "job_offer", "required": False, "weight": 20,
     "criteria": "Job offer strengthens most applications"},
    {"kind": "financial_proof", "required": False, "weight": 20,
     "criteria": "Proof of sufficient funds"},
]

DEFAULT_PASSING_SCORE = 60
DEFAULT_DESCRIPTION = "General eligibility assessment (visa type not modelled in detail)"

# Document checklist for each purpose group, before any visa-specific extras.
BASE_DOCUMENTS: dict[str, list[str]] = {
    "student": ["Passport", "Resume/CV", "Academic Transcripts", "Degree Certificates",
                "English Proficiency Test", "Statement of Purpose", "Financial Proof"],
    "work": ["Passport", "Resume/CV", "Degree Certificates", "Work Experience Letters",
             "Job Offer Letter", "Salary Proof", "Skills Certifications"],
    "migration": ["Passport", "Resume/CV", "Degree Certificates", "Work Experience Letters",
                  "Language Test Results", "Skills Assessment", "Financial Proof"],
    "business": ["Passport", "Resume/CV", "Business Plan", "Financial Statements",
                 "Investment Proof", "Professional Qualifications"],
    "family": ["Passport", "Relationship Proof", "Sponsor Documents", "Financial Proof",
               "Accommodation Proof"],
    "internship": ["Passport", "Resume/CV", "Academic Transcripts", "Internship Offer",
                   "Training Plan", "Financial Proof"],
}

PURPOSE_DOCUMENT_GROUPS: dict[str, str] = {
    "Bachelor's Degree Study": "student",
    "Master's Degree Study": "student",
    "PhD/Research": "student",
    "Work - Job Offer": "work",
    "Work - Job Seeking": "work",
    "Skilled Migration": "migration",
    "Business/Entrepreneurship": "business",
    "Family Reunification": "family",
    "Internship/Training": "internship",
}
