"""Tests for the rule-based verifier library."""

import pytest

from models.schemas.original_input import InputEducation, InputExperience, OriginalInputData
from models.schemas.resume_content import (
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    GeneratedResumeContent,
    LanguageEntry,
    ProjectEntry,
    SkillsSection,
)
from services.scoring import verifiers

FIRST_PERSON_SUMMARY = " ".join(
    ["I led the platform team through two major migrations and I am proud of my results."] * 5
)


class TestSummaryVerifiers:
    def test_length_bounds(self):
        assert not verifiers.summary_adequate_length("Too short.").passed
        assert not verifiers.summary_adequate_length("x" * 1200).passed
        assert verifiers.summary_adequate_length(FIRST_PERSON_SUMMARY).passed

    def test_first_person_fails_with_pronouns_in_reason(self):
        result = verifiers.summary_no_first_person(FIRST_PERSON_SUMMARY)
        assert not result.passed
        assert result.reason.startswith("Summary uses first-person pronouns")
        assert "my" in result.evidence

    def test_implied_subject_passes(self):
        assert verifiers.summary_no_first_person("Led platform migrations for a payments company.").passed

    @pytest.mark.parametrize("summary", [
        "Backend engineer who built high-throughput I/O systems for payment platforms.",
        "Focused on reliability, i.e. fewer outages and faster incident recovery.",
        "Led the Phase I rollout of a national payments platform.",
    ])
    def test_abbreviations_are_not_first_person(self, summary):
        result = verifiers.summary_no_first_person(summary)
        assert result.passed, result.evidence

    def test_possessives_are_case_insensitive(self):
        assert not verifiers.summary_no_first_person("MY team shipped the platform on time.").passed

    def test_metrics(self):
        assert verifiers.summary_has_metrics("Cut cloud spend by 30% in one year.").passed
        assert not verifiers.summary_has_metrics("Cut cloud spend significantly.").passed

    def test_ats_keywords_use_profession_terms(self):
        text = "Backend engineer who delivered reliable payment services."
        assert not verifiers.summary_has_ats_keywords(text).passed
        context = OriginalInputData(profession="Backend Engineer")
        assert verifiers.summary_has_ats_keywords(text, context).passed

    def test_keyword_density_band(self):
        stuffed = "delivered results growth strategy leadership quality performance efficiency"
        result = verifiers.summary_keyword_density(stuffed)
        assert not result.passed
        assert "stuffing" in result.reason
        sparse = " ".join(["word"] * 60)
        assert "too low" in verifiers.summary_keyword_density(sparse).reason

    @pytest.mark.parametrize("verifier", [
        verifiers.summary_adequate_length,
        verifiers.summary_no_first_person,
        verifiers.summary_has_metrics,
        verifiers.summary_has_ats_keywords,
        verifiers.summary_keyword_density,
    ])
    def test_empty_summary_fails_every_item(self, verifier):
        result = verifier("   ")
        assert not result.passed
        assert result.reason


class TestExperienceVerifiers:
    def test_example_entry_without_numbers(self):
        entries = [ExperienceEntry(title="Engineer", achievements=["Improved system reliability"], responsibilities=[])]
        metrics = verifiers.experience_has_metrics(entries)
        assert not metrics.passed
        assert "no quantifiable metric found" in metrics.reason.lower()
        assert verifiers.experience_has_achievements(entries).passed

    def test_metrics_needs_half_of_roles(self):
        entries = [
            ExperienceEntry(title="A", achievements=["Grew revenue by 20%"]),
            ExperienceEntry(title="B", achievements=["Ran the help desk"]),
            ExperienceEntry(title="C", achievements=["Kept things tidy"]),
        ]
        result = verifiers.experience_has_metrics(entries)
        assert not result.passed
        assert "1 of 3" in result.reason

    def test_action_verbs_ratio(self):
        weak = [ExperienceEntry(title="A", responsibilities=["Responsible for builds", "Helped QA", "Led releases"])]
        result = verifiers.experience_action_verbs(weak)
        assert not result.passed
        assert result.evidence == "Responsible for builds"
        strong = [ExperienceEntry(title="A", achievements=["Led releases", "Automated QA"])]
        assert verifiers.experience_action_verbs(strong).passed

    def test_responsibility_is_not_an_achievement(self):
        entries = [ExperienceEntry(
            title="Analyst",
            achievements=["Prepared weekly reports"],
            responsibilities=["Prepared weekly reports"],
        )]
        result = verifiers.experience_has_achievements(entries)
        assert not result.passed
        assert result.evidence == "Analyst"

    def test_duty_phrasing_is_not_an_achievement(self):
        entries = [ExperienceEntry(title="Analyst", achievements=["Responsible for weekly reports"])]
        assert not verifiers.experience_has_achievements(entries).passed

    def test_progression_uses_start_years(self):
        entries = [
            ExperienceEntry(title="Senior Engineer", start_date="2021"),
            ExperienceEntry(title="Junior Engineer", start_date="2017"),
        ]
        assert verifiers.experience_shows_progression(entries).passed

    def test_progression_detects_step_down(self):
        entries = [
            ExperienceEntry(title="Junior Developer", start_date="2022"),
            ExperienceEntry(title="Engineering Manager", start_date="2018"),
        ]
        result = verifiers.experience_shows_progression(entries)
        assert not result.passed
        assert result.evidence == "Engineering Manager -> Junior Developer"

    def test_progression_without_dates_assumes_recent_first(self):
        entries = [ExperienceEntry(title="Lead Engineer"), ExperienceEntry(title="Intern")]
        assert verifiers.experience_shows_progression(entries).passed

    def test_single_role_passes_progression(self):
        assert verifiers.experience_shows_progression([ExperienceEntry(title="Engineer")]).passed

    def test_empty_experience_fails(self):
        for verifier in (
            verifiers.experience_has_metrics,
            verifiers.experience_action_verbs,
            verifiers.experience_has_achievements,
            verifiers.experience_shows_progression,
        ):
            assert verifier([]).reason == "No work experience provided"


class TestSkillsVerifiers:
    def test_single_category_is_unorganized(self):
        skills = SkillsSection(technical=["Python", "SQL", "Teamwork", "Excel"])
        assert not verifiers.skills_organized(skills).passed
        assert verifiers.skills_has_technical(skills).passed
        assert not verifiers.skills_has_soft(skills).passed
        assert not verifiers.skills_has_tools(skills).passed

    def test_categorized_skills_pass(self):
        skills = SkillsSection(technical=["Python"], soft=["Communication"], tools=["Git"])
        for verifier in (
            verifiers.skills_organized,
            verifiers.skills_has_technical,
            verifiers.skills_has_soft,
            verifiers.skills_has_tools,
        ):
            assert verifier(skills).passed


class TestEducationVerifiers:
    def test_complete_entry(self):
        entries = [EducationEntry(institution="MIT", degree="BSc", field="Physics", end_date="2015")]
        assert verifiers.education_has_dates(entries).passed
        assert verifiers.education_has_institution(entries).passed
        assert verifiers.education_has_degree_field(entries).passed

    def test_missing_fields_are_never_inferred(self):
        entries = [
            EducationEntry(institution="MIT", degree="BSc", field="Physics", end_date="2015"),
            EducationEntry(degree="MSc"),
        ]
        assert "1 of 2" in verifiers.education_has_dates(entries).reason
        assert not verifiers.education_has_institution(entries).passed
        assert not verifiers.education_has_degree_field(entries).passed

    def test_duration_counts_as_dates(self):
        assert verifiers.education_has_dates([EducationEntry(duration="2010 - 2014")]).passed


class TestOtherSections:
    def test_certifications(self):
        certs = [CertificationEntry(name="CKA", issuer="CNCF", date="2023"), CertificationEntry(name="PMP")]
        assert not verifiers.certifications_have_issuer(certs).passed
        assert not verifiers.certifications_have_date(certs).passed
        assert verifiers.certifications_have_issuer(certs[:1]).passed

    def test_projects(self):
        projects = [
            ProjectEntry(
                name="Ledger",
                description="Double-entry ledger used by 40 teams for reconciliation",
                technologies=["Go"],
            ),
            ProjectEntry(name="Blog", description="Blog", technologies=[]),
        ]
        result = verifiers.projects_have_descriptions(projects)
        assert not result.passed
        assert result.evidence == "Blog"
        assert not verifiers.projects_have_technologies(projects).passed
        assert verifiers.projects_have_impact(projects).passed

    def test_project_without_impact(self):
        projects = [ProjectEntry(name="Notes", description="A small note taking application for personal use")]
        assert not verifiers.projects_have_impact(projects).passed

    def test_achievements_strict_metrics(self):
        items = ["Won #1 at regional hackathon", "Grew newsletter to 5,000 users"]
        assert verifiers.achievements_have_metrics(items).passed
        assert not verifiers.achievements_have_metrics(items + ["Organized meetups for 2 years"]).passed

    def test_achievements_quantifiable(self):
        assert verifiers.achievements_quantifiable(["Awarded employee of the year", "Spoke at PyCon"]).passed
        assert not verifiers.achievements_quantifiable(["Spoke at PyCon", "Wrote docs", "Ran meetups"]).passed

    def test_languages_need_known_level(self):
        entries = [LanguageEntry(language="Spanish", level="C1"), LanguageEntry(language="French", level="some")]
        result = verifiers.languages_have_levels(entries)
        assert not result.passed
        assert result.evidence == "French"
        assert verifiers.languages_have_levels(entries[:1]).passed


class TestContactVerifiers:
    @pytest.mark.parametrize("email", [
        "",
        "not-an-email",
        "alex@mailinator.com",
        "hotstuff@gmail.com",
        "admin@company.com",
        "alex19951995@gmail.com",
    ])
    def test_unprofessional_email(self, email):
        assert not verifiers.contact_professional_email(ContactInfo(email=email)).passed

    def test_professional_email(self):
        assert verifiers.contact_professional_email(ContactInfo(email="alex.morgan@example.com")).passed

    def test_phone_needs_digits(self):
        assert not verifiers.contact_has_phone(ContactInfo(phone="call me")).passed
        assert verifiers.contact_has_phone(ContactInfo(phone="(416) 555-0199")).passed

    def test_linkedin_profile_url(self):
        assert verifiers.contact_has_linkedin(ContactInfo(linkedin="linkedin.com/in/alex-morgan")).passed
        assert not verifiers.contact_has_linkedin(ContactInfo(linkedin="https://linkedin.com/company/acme")).passed


class TestIntegrityVerifiers:
    def setup_method(self):
        self.resume = GeneratedResumeContent(
            experience=[ExperienceEntry(title="Engineer", company="Acme Corp", achievements=["Cut costs by 30%"])],
            education=[EducationEntry(institution="University of Waterloo")],
        )

    def test_without_input_everything_fails(self):
        for verifier in (
            verifiers.integrity_metrics_grounded,
            verifiers.integrity_experience_grounded,
            verifiers.integrity_education_grounded,
        ):
            assert not verifier(self.resume, None).passed
            assert not verifier(self.resume, OriginalInputData()).passed

    def test_fabricated_metric_is_flagged(self):
        context = OriginalInputData(experience=[InputExperience(company="Acme", achievements=["Cut costs"])])
        result = verifiers.integrity_metrics_grounded(self.resume, context)
        assert not result.passed
        assert result.evidence == "30"

    def test_grounded_metric_passes(self):
        context = OriginalInputData(experience=[InputExperience(company="Acme", achievements=["Cut costs 30%"])])
        assert verifiers.integrity_metrics_grounded(self.resume, context).passed

    def test_fuzzy_company_and_institution_match(self):
        context = OriginalInputData(
            experience=[InputExperience(title="Engineer", company="ACME Corp.")],
            education=[InputEducation(institution="Waterloo University")],
        )
        assert verifiers.integrity_experience_grounded(self.resume, context).passed
        assert verifiers.integrity_education_grounded(self.resume, context).passed

    def test_invented_company_is_flagged(self):
        context = OriginalInputData(experience=[InputExperience(title="Engineer", company="Globex")])
        assert not verifiers.integrity_experience_grounded(self.resume, context).passed


def test_every_verifier_is_registered_once():
    assert len(verifiers.VERIFIERS) == len(set(verifiers.VERIFIERS.values()))
