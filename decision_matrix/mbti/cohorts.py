"""
mbti/cohorts.py - fixed cohort schemes over the sixteen archetypes

houses       four Hogwarts houses, four types each
departments  seven Dunder Mifflin departments, one to three types each

Cohort dicts are in display order; grouping follows it.
"""
from typing import Dict

from decision_matrix.models.cohort import CohortInfo, CohortMembership
from decision_matrix.models.enumerations import CohortScheme, MBTIType

GRYFFINDOR = "#740001"
HUFFLEPUFF = "#FFD800"
RAVENCLAW = "#0E1A40"
SLYTHERIN = "#1A472A"

HOUSES: Dict[str, CohortInfo] = {
    "Gryffindor": CohortInfo(
        name="Gryffindor",
        color=GRYFFINDOR,
        motto="Daring, nerve, and chivalry set Gryffindors apart.",
        characters=["Harry Potter", "Hermione Granger", "Ron Weasley"],
    ),
    "Hufflepuff": CohortInfo(
        name="Hufflepuff",
        color=HUFFLEPUFF,
        motto="Those patient Hufflepuffs are true and unafraid of toil.",
        characters=["Cedric Diggory", "Nymphadora Tonks", "Pomona Sprout"],
    ),
    "Ravenclaw": CohortInfo(
        name="Ravenclaw",
        color=RAVENCLAW,
        motto="Wit beyond measure is man's greatest treasure.",
        characters=["Luna Lovegood", "Cho Chang", "Garrick Ollivander"],
    ),
    "Slytherin": CohortInfo(
        name="Slytherin",
        color=SLYTHERIN,
        motto="Those cunning folk use any means to achieve their ends.",
        characters=["Severus Snape", "Draco Malfoy", "Tom Riddle"],
    ),
}

HOUSE_BY_MBTI: Dict[MBTIType, CohortMembership] = {
    MBTIType.ENFJ: CohortMembership(
        cohort="Gryffindor", color=GRYFFINDOR,
        traits=["bravery", "courage", "determination", "leadership"],
        characters=["Harry Potter", "Molly Weasley"],
    ),
    MBTIType.ENTJ: CohortMembership(
        cohort="Gryffindor", color=GRYFFINDOR,
        traits=["bravery", "leadership", "boldness", "confidence"],
        characters=["Hermione Granger", "McGonagall"],
    ),
    MBTIType.ESFP: CohortMembership(
        cohort="Gryffindor", color=GRYFFINDOR,
        traits=["courage", "adventurous", "enthusiastic", "spontaneous"],
        characters=["Peeves", "Rita Skeeter"],
    ),
    MBTIType.ESTP: CohortMembership(
        cohort="Gryffindor", color=GRYFFINDOR,
        traits=["boldness", "risk-taking", "action-oriented", "adaptable"],
        characters=["Draco Malfoy", "Gilderoy Lockhart"],
    ),
    MBTIType.ISFJ: CohortMembership(
        cohort="Hufflepuff", color=HUFFLEPUFF,
        traits=["loyalty", "patience", "fairness", "hard-working"],
        characters=["Hagrid", "Mrs. Weasley"],
    ),
    MBTIType.ESFJ: CohortMembership(
        cohort="Hufflepuff", color=HUFFLEPUFF,
        traits=["loyalty", "supportive", "caring", "inclusive"],
        characters=["Cedric Diggory", "Fleur Delacour"],
    ),
    MBTIType.ISFP: CohortMembership(
        cohort="Hufflepuff", color=HUFFLEPUFF,
        traits=["patience", "kindness", "harmony", "authenticity"],
        characters=["Cho Chang", "Lavender Brown"],
    ),
    MBTIType.ENFP: CohortMembership(
        cohort="Hufflepuff", color=HUFFLEPUFF,
        traits=["enthusiasm", "inclusivity", "optimism", "empathy"],
        characters=["Ron Weasley", "Tonks"],
    ),
    MBTIType.INTJ: CohortMembership(
        cohort="Ravenclaw", color=RAVENCLAW,
        traits=["intelligence", "strategy", "independence", "vision"],
        characters=["Severus Snape", "Tom Riddle"],
    ),
    MBTIType.INTP: CohortMembership(
        cohort="Ravenclaw", color=RAVENCLAW,
        traits=["wisdom", "analysis", "creativity", "logic"],
        characters=["Luna Lovegood", "Newt Scamander"],
    ),
    MBTIType.INFJ: CohortMembership(
        cohort="Ravenclaw", color=RAVENCLAW,
        traits=["insight", "intuition", "wisdom", "idealism"],
        characters=["Dumbledore", "Remus Lupin"],
    ),
    MBTIType.INFP: CohortMembership(
        cohort="Ravenclaw", color=RAVENCLAW,
        traits=["creativity", "individuality", "depth", "authenticity"],
        characters=["Dobby", "Neville Longbottom"],
    ),
    MBTIType.ESTJ: CohortMembership(
        cohort="Slytherin", color=SLYTHERIN,
        traits=["ambition", "leadership", "efficiency", "determination"],
        characters=["Dolores Umbridge", "Vernon Dursley"],
    ),
    MBTIType.ISTJ: CohortMembership(
        cohort="Slytherin", color=SLYTHERIN,
        traits=["resourcefulness", "persistence", "strategy", "reliability"],
        characters=["Percy Weasley", "Barty Crouch Sr."],
    ),
    MBTIType.ENTP: CohortMembership(
        cohort="Slytherin", color=SLYTHERIN,
        traits=["cunning", "adaptability", "innovation", "persuasion"],
        characters=["Fred Weasley", "George Weasley"],
    ),
    MBTIType.ISTP: CohortMembership(
        cohort="Slytherin", color=SLYTHERIN,
        traits=["resourcefulness", "pragmatism", "independence", "efficiency"],
        characters=["Sirius Black", "Mad-Eye Moody"],
    ),
}

MANAGEMENT = "#1e40af"
SALES = "#059669"
ACCOUNTING = "#7c2d12"
RECEPTION = "#be185d"
HR = "#7c3aed"
CUSTOMER_SERVICE = "#ea580c"
CORPORATE = "#6b7280"

DEPARTMENTS: Dict[str, CohortInfo] = {
    "Management": CohortInfo(
        name="Management",
        color=MANAGEMENT,
        description=(
            "Visionary leaders who drive company culture and strategic direction through "
            "inspiration and decisive action."
        ),
        motto="That's what she said... about leadership excellence!",
        characteristics=["Strategic thinking", "Team motivation", "Decision authority", "Cultural influence"],
    ),
    "Sales": CohortInfo(
        name="Sales",
        color=SALES,
        description=(
            "Results-driven professionals who build relationships and close deals through "
            "persistence and adaptability."
        ),
        motto="Bears. Beets. Battlestar Galactica. Sales.",
        characteristics=["Revenue focus", "Client relationships", "Competitive drive", "Adaptability"],
    ),
    "Accounting": CohortInfo(
        name="Accounting",
        color=ACCOUNTING,
        description=(
            "Detail-oriented analysts who ensure financial accuracy and compliance through "
            "systematic processes."
        ),
        motto="Actually, the numbers don't lie.",
        characteristics=["Precision", "Compliance", "Analytical thinking", "Process adherence"],
    ),
    "Reception": CohortInfo(
        name="Reception",
        color=RECEPTION,
        description=(
            "Supportive coordinators who maintain office operations and provide excellent "
            "internal customer service."
        ),
        motto="Dunder Mifflin, this is Pam... I mean, how can we help?",
        characteristics=["Organization", "Communication", "Support", "Coordination"],
    ),
    "HR": CohortInfo(
        name="HR",
        color=HR,
        description=(
            "People-focused professionals who balance employee needs with company policies "
            "and conflict resolution."
        ),
        motto="I'm not superstitious, but I am a little stitious about HR policies.",
        characteristics=["Employee relations", "Policy enforcement", "Conflict resolution", "Compliance"],
    ),
    "Customer Service": CohortInfo(
        name="Customer Service",
        color=CUSTOMER_SERVICE,
        description=(
            "Energetic representatives who maintain client satisfaction through enthusiasm "
            "and problem-solving."
        ),
        motto="OMG, like, customer satisfaction is totally our thing!",
        characteristics=["Client satisfaction", "Problem solving", "Energy", "Responsiveness"],
    ),
    "Corporate": CohortInfo(
        name="Corporate",
        color=CORPORATE,
        description="Strategic thinkers who analyze company operations and implement corporate initiatives.",
        motto="Synergy and optimization through strategic corporate alignment.",
        characteristics=["Strategic analysis", "Process improvement", "Corporate alignment", "Innovation"],
    ),
}

DEPARTMENT_BY_MBTI: Dict[MBTIType, CohortMembership] = {
    MBTIType.ENFP: CohortMembership(
        cohort="Management", color=MANAGEMENT, role="Regional Manager",
        traits=["charismatic", "enthusiastic", "people-focused", "creative"],
        characters=["Michael Scott"],
    ),
    MBTIType.ENTJ: CohortMembership(
        cohort="Management", color=MANAGEMENT, role="Corporate Executive",
        traits=["strategic", "decisive", "results-oriented", "authoritative"],
        characters=["Jan Levinson"],
    ),
    MBTIType.ENFJ: CohortMembership(
        cohort="Management", color=MANAGEMENT, role="Regional Director",
        traits=["inspiring", "collaborative", "goal-oriented", "diplomatic"],
        characters=["Andy Bernard"],
    ),
    MBTIType.ENTP: CohortMembership(
        cohort="Sales", color=SALES, role="Sales Representative",
        traits=["persuasive", "adaptable", "relationship-building", "innovative"],
        characters=["Jim Halpert"],
    ),
    MBTIType.ESTP: CohortMembership(
        cohort="Sales", color=SALES, role="Traveling Salesman",
        traits=["aggressive", "competitive", "action-oriented", "opportunistic"],
        characters=["Todd Packer"],
    ),
    MBTIType.ISTJ: CohortMembership(
        cohort="Sales", color=SALES, role="Top Salesman",
        traits=["persistent", "methodical", "reliable", "detail-focused"],
        characters=["Dwight Schrute"],
    ),
    MBTIType.INTJ: CohortMembership(
        cohort="Accounting", color=ACCOUNTING, role="Senior Accountant",
        traits=["analytical", "precise", "logical", "independent"],
        characters=["Oscar Martinez"],
    ),
    MBTIType.ESTJ: CohortMembership(
        cohort="Accounting", color=ACCOUNTING, role="Head of Accounting",
        traits=["organized", "efficient", "rule-following", "authoritative"],
        characters=["Angela Martin"],
    ),
    MBTIType.ISTP: CohortMembership(
        cohort="Accounting", color=ACCOUNTING, role="Financial Analyst",
        traits=["practical", "logical", "independent", "problem-solving"],
        characters=["Stanley Hudson"],
    ),
    MBTIType.ISFJ: CohortMembership(
        cohort="Reception", color=RECEPTION, role="Receptionist",
        traits=["supportive", "organized", "helpful", "detail-oriented"],
        characters=["Pam Beesly"],
    ),
    MBTIType.INFP: CohortMembership(
        cohort="Reception", color=RECEPTION, role="Reception Assistant",
        traits=["caring", "adaptable", "creative", "people-focused"],
        characters=["Erin Hannon"],
    ),
    MBTIType.ESFJ: CohortMembership(
        cohort="Reception", color=RECEPTION, role="Office Coordinator",
        traits=["social", "organized", "supportive", "team-oriented"],
        characters=["Phyllis Vance"],
    ),
    MBTIType.INFJ: CohortMembership(
        cohort="HR", color=HR, role="HR Representative",
        traits=["empathetic", "principled", "conflict-resolution", "systematic"],
        characters=["Toby Flenderson"],
    ),
    MBTIType.ISFP: CohortMembership(
        cohort="HR", color=HR, role="HR Liaison",
        traits=["compassionate", "flexible", "people-focused", "harmonious"],
        characters=["Holly Flax"],
    ),
    MBTIType.ESFP: CohortMembership(
        cohort="Customer Service", color=CUSTOMER_SERVICE, role="Customer Service Rep",
        traits=["energetic", "people-oriented", "spontaneous", "enthusiastic"],
        characters=["Kelly Kapoor"],
    ),
    MBTIType.INTP: CohortMembership(
        cohort="Corporate", color=CORPORATE, role="Corporate Liaison",
        traits=["analytical", "strategic", "independent", "innovative"],
        characters=["Gabe Lewis"],
    ),
}

COHORT_SCHEMES: Dict[CohortScheme, Dict[str, CohortInfo]] = {
    CohortScheme.HOUSES: HOUSES,
    CohortScheme.DEPARTMENTS: DEPARTMENTS,
}

COHORT_MEMBERSHIP: Dict[CohortScheme, Dict[MBTIType, CohortMembership]] = {
    CohortScheme.HOUSES: HOUSE_BY_MBTI,
    CohortScheme.DEPARTMENTS: DEPARTMENT_BY_MBTI,
}
