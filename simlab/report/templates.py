"""Report phrasing keyed by (scenario id, era).

Each section table maps ``(scenario_id, era)`` to a tuple of template lines
(paragraphs for the summary, bullets elsewhere). Placeholders are the keys of
``ReportFacts.placeholders()``. The default scenario ("moderate") covers every
era of every section; any other combination may be absent and falls back to
it for the same era.

Scenario identities:
    aggressive  bold, early, coordinated action
    moderate    Paris-aligned transition, implemented unevenly
    bau         current policies extended forward
    worst       sustained policy failure plus bad luck with feedbacks
"""

from __future__ import annotations

import logging

from simlab.report.models import SectionKey
from simlab.scenario.eras import Era
from simlab.utils import TemplateLookupError

logger = logging.getLogger(__name__)

SectionTable = dict[tuple[str, str], tuple[str, ...]]

DEFAULT_SCENARIO = "moderate"
SCENARIO_IDS: tuple[str, ...] = ("aggressive", "moderate", "bau", "worst")


# ---------------------------------------------------------------------------
# Summary (paragraphs)
# ---------------------------------------------------------------------------

SUMMARY: SectionTable = {
    ("aggressive", "dawn"): (
        "It is {year}, {elapsed} years into the {scenario_name} branch, and the "
        "first signs of a deliberate turn are visible. Emissions sit at {emissions} Gt, "
        "a {emissions_pct} move from the {baseline_year} baseline, while the civic "
        "dividend ({dividend_pct} of revenue) has started landing in household budgets.",
        "Nothing has compounded yet. The trajectory scores {score}/100 ({rating}), and "
        "most of that reflects intent rather than outcomes: trust at {trust} and "
        "resilience at {resilience} are still close to where they began.",
    ),
    ("aggressive", "diverge"): (
        "By {year} the {scenario_name} branch has clearly split from the pack. Annual "
        "emissions are down to {emissions} Gt ({emissions_pct} against {baseline_year}), "
        "GINI has moved to {gini}, and civic trust reads {trust}.",
        "The composite score stands at {score}/100 ({rating}). The early investments, "
        "{capex_pct} of budget to climate and an AI charter that is {charter}, are now "
        "showing up in measured outcomes rather than announcements.",
    ),
    ("aggressive", "mature"): (
        "In {year}, {elapsed} years on, the {scenario_name} world has settled into its "
        "new shape. Emissions of {emissions} Gt are roughly {emissions_cut_pct} below the "
        "baseline, and resilience at {resilience} means shocks that once cascaded are "
        "now absorbed locally.",
        "A score of {score}/100 ({rating}) reflects institutions that kept pace with "
        "automation: AI influence is {ai} against trust of {trust}.",
    ),
    ("aggressive", "legacy"): (
        "By {year} the {scenario_name} choices made in {baseline_year} have become "
        "inheritance. Emissions run at {emissions} Gt, inequality sits at a GINI of "
        "{gini}, and a generation has grown up with the dividend as ordinary "
        "infrastructure.",
        "The trajectory holds at {score}/100 ({rating}). The open question is no longer "
        "whether the transition works but whether its institutions stay vigilant.",
    ),
    ("moderate", "dawn"): (
        "It is {year}, {elapsed} years after {baseline_year}, and the {scenario_name} "
        "branch looks much like the present with better intentions. Emissions are "
        "{emissions} Gt ({emissions_pct}), and the policy mix of a {dividend_pct} "
        "dividend with {capex_pct} climate capex is only starting to bite.",
        "The composite reads {score}/100 ({rating}). Trust at {trust} leaves room for "
        "cooperation, but nothing is locked in yet.",
    ),
    ("moderate", "diverge"): (
        "By {year} the {scenario_name} branch is pulling away from inaction, if not "
        "dramatically. Emissions have reached {emissions} Gt, {emissions_pct} against "
        "the baseline, and GINI stands at {gini}.",
        "At {score}/100 ({rating}) the world is stressed but stabilizing. The gap "
        "between AI influence ({ai}) and trust ({trust}) is the number to watch.",
    ),
    ("moderate", "mature"): (
        "In {year} the {scenario_name} world is livable but carries little margin. "
        "Emissions of {emissions} Gt are about {emissions_cut_pct} below "
        "{baseline_year}, and resilience of {resilience} holds against ordinary shocks.",
        "The trajectory scores {score}/100 ({rating}). Progress is real and uneven: "
        "the AI governance gap stands at {ai_gap}.",
    ),
    ("moderate", "legacy"): (
        "By {year}, {elapsed} years out, the {scenario_name} branch has delivered a "
        "world that avoided the worst without escaping risk. Emissions sit at "
        "{emissions} Gt and GINI at {gini}.",
        "A composite of {score}/100 ({rating}) describes a society that muddled through. "
        "Its institutions, at trust {trust}, remain the deciding variable.",
    ),
    ("bau", "dawn"): (
        "It is {year} on the {scenario_name} branch and, on the surface, little has "
        "changed. Emissions are {emissions} Gt ({emissions_pct} since {baseline_year}), "
        "and the levers remain near their minimums: a {dividend_pct} dividend and an "
        "AI charter that is {charter}.",
        "The score of {score}/100 ({rating}) flatters the present. Trends that look "
        "harmless now are the ones that compound.",
    ),
    ("bau", "diverge"): (
        "By {year} the costs of drift are measurable. Emissions remain at {emissions} Gt "
        "({emissions_pct} against baseline) and GINI has moved to {gini}.",
        "The trajectory reads {score}/100 ({rating}). AI influence of {ai} is rising "
        "faster than trust ({trust}) can follow.",
    ),
    ("bau", "mature"): (
        "In {year} the {scenario_name} branch has become a chronicle of compounding "
        "pressure. Emissions of {emissions} Gt keep the climate system moving, and "
        "resilience at {resilience} leaves communities exposed.",
        "A score of {score}/100 ({rating}) is the price of deferring decisions. The "
        "governance gap stands at {ai_gap}.",
    ),
    ("bau", "legacy"): (
        "By {year}, {elapsed} years from {baseline_year}, the {scenario_name} default "
        "has hardened into the world's operating condition. Emissions run at "
        "{emissions} Gt and GINI at {gini}.",
        "The composite of {score}/100 ({rating}) is not bad luck. It is current policy, "
        "extended forward.",
    ),
    ("worst", "dawn"): (
        "It is {year} and the {scenario_name} branch has begun quietly. Emissions are "
        "{emissions} Gt ({emissions_pct}), trust sits at {trust}, and the early "
        "warnings read as noise.",
        "At {score}/100 ({rating}) this branch is not yet distinguishable from the "
        "others. That is precisely what makes it dangerous.",
    ),
    ("worst", "diverge"): (
        "By {year} the {scenario_name} branch is unravelling. Emissions stand at "
        "{emissions} Gt, GINI has climbed to {gini}, and trust has slid to {trust}.",
        "The score of {score}/100 ({rating}) captures a feedback loop in motion: "
        "AI influence of {ai} is filling the space institutions left behind.",
    ),
    ("worst", "mature"): (
        "In {year} the {scenario_name} world is in open crisis. Emissions of {emissions} Gt "
        "have pushed the climate past several thresholds, and resilience of "
        "{resilience} means each shock lands at full force.",
        "The trajectory reads {score}/100 ({rating}). The AI governance gap of {ai_gap} "
        "has become the defining political fact.",
    ),
    ("worst", "legacy"): (
        "By {year}, {elapsed} years after {baseline_year}, the {scenario_name} branch "
        "describes a different planet. Emissions remain at {emissions} Gt and "
        "inequality at {gini}.",
        "A composite of {score}/100 ({rating}) is the record of what was risked. It "
        "exists to show what acting early was worth.",
    ),
}


# ---------------------------------------------------------------------------
# Status quo comparison (bullets; only rendered with an opposing snapshot)
# ---------------------------------------------------------------------------

STATUS_QUO: SectionTable = {
    ("moderate", "dawn"): (
        "In {year} the contrast branch looks almost the same: GINI {opp_gini} against "
        "{gini} here, emissions {opp_emissions} Gt against {emissions} Gt.",
        "The difference is direction, not level. Early gaps this small are where "
        "later divergence starts.",
    ),
    ("moderate", "diverge"): (
        "On the contrast branch GINI sits at {opp_gini} rather than {gini}, and "
        "trust at {opp_trust} rather than {trust}.",
        "Emissions on the contrast path run at {opp_emissions} Gt against "
        "{emissions} Gt here; the cost of the policy gap is now measurable.",
    ),
    ("moderate", "mature"): (
        "The contrast path reaches {year} with resilience of {opp_resilience} against "
        "{resilience} here; the gap decides which disasters cascade.",
        "Emissions of {opp_emissions} Gt on the other branch against {emissions} Gt here "
        "mark the difference between stress and breakdown.",
    ),
    ("moderate", "legacy"): (
        "After {elapsed} years the contrast branch has GINI {opp_gini} and trust "
        "{opp_trust}; this branch holds {gini} and {trust}.",
        "The cumulative gap is now structural: it shapes which institutions exist at "
        "all, not just how well they work.",
    ),
    ("aggressive", "dawn"): (
        "The status-quo branch in {year} is barely different on paper: emissions "
        "{opp_emissions} Gt against {emissions} Gt here.",
        "What differs is momentum. Trust of {opp_trust} on the inaction path has no "
        "dividend behind it.",
    ),
    ("aggressive", "diverge"): (
        "Without action, GINI stays at {opp_gini} against {gini} with intervention, "
        "and emissions hold at {opp_emissions} Gt.",
        "The biggest risk of inaction is trust: {opp_trust} on the status-quo path "
        "against {trust} here, and every other metric depends on it.",
    ),
    ("aggressive", "mature"): (
        "The status-quo branch reaches {year} with resilience of {opp_resilience}, "
        "against {resilience} under bold action.",
        "Its emissions of {opp_emissions} Gt mean the climate keeps moving while this "
        "branch, at {emissions} Gt, has begun to stabilize it.",
    ),
    ("aggressive", "legacy"): (
        "Two generations in, the inaction path carries GINI {opp_gini} and AI "
        "influence {opp_ai} with little oversight.",
        "The contrast is no longer a matter of degree. The two branches describe "
        "different societies.",
    ),
    ("worst", "dawn"): (
        "The bolder branch in {year} shows what is still within reach: emissions "
        "{opp_emissions} Gt against {emissions} Gt here.",
        "Its trust of {opp_trust} against {trust} on this path is the early signal "
        "this branch is ignoring.",
    ),
    ("worst", "diverge"): (
        "With bold action, GINI would sit at {opp_gini} instead of {gini}, and trust "
        "at {opp_trust} instead of {trust}.",
        "The bolder branch already runs at {opp_emissions} Gt against {emissions} Gt "
        "here, and the gap widens every year this path holds.",
    ),
    ("worst", "mature"): (
        "Had the bolder branch been taken, resilience in {year} would read "
        "{opp_resilience} rather than {resilience}.",
        "Its emissions of {opp_emissions} Gt against {emissions} Gt on this path are "
        "the margin between a managed climate and a runaway one.",
    ),
    ("worst", "legacy"): (
        "On the bolder branch the same year reads GINI {opp_gini}, resilience "
        "{opp_resilience} and emissions {opp_emissions} Gt.",
        "Every one of those numbers was available from {baseline_year}. This branch "
        "chose otherwise.",
    ),
    ("bau", "dawn"): (
        "With bold action from {baseline_year}, emissions in {year} would be "
        "{opp_emissions} Gt against {emissions} Gt on the current course.",
        "Trust would read {opp_trust} rather than {trust}; the early gap is small, "
        "but only the bolder branch is building on it.",
    ),
    ("bau", "diverge"): (
        "With bold action, GINI would sit at {opp_gini} instead of {gini}, and "
        "civic trust at {opp_trust} instead of {trust}.",
        "Emissions would run at {opp_emissions} Gt rather than {emissions} Gt; "
        "staying the course is already costing headroom.",
    ),
    ("bau", "mature"): (
        "The bolder branch reaches {year} with resilience of {opp_resilience}, "
        "against {resilience} on the current course.",
        "Its emissions of {opp_emissions} Gt against {emissions} Gt here show what "
        "{elapsed} years of intervention buy.",
    ),
    ("bau", "legacy"): (
        "After {elapsed} years, bold action would have left GINI at {opp_gini} and "
        "trust at {opp_trust}; this branch holds {gini} and {trust}.",
        "AI influence of {opp_ai} under oversight on the other branch, against {ai} "
        "here, marks the largest difference of all.",
    ),
}


# ---------------------------------------------------------------------------
# Baseline comparison (bullets)
# ---------------------------------------------------------------------------

BASELINE: SectionTable = {
    ("moderate", "dawn"): (
        "GINI has moved from {baseline_gini} to {gini} ({gini_delta}) since "
        "{baseline_year}; at this stage that is drift, not policy.",
        "Emissions are {emissions} Gt against {baseline_emissions} Gt at baseline "
        "({emissions_pct}), and trust has shifted {trust_delta} to {trust}.",
    ),
    ("moderate", "diverge"): (
        "Compared with {baseline_year}, GINI has moved {gini_delta} to {gini} and civic "
        "trust {trust_delta} to {trust}.",
        "Emissions changed {emissions_pct} ({baseline_emissions} Gt to {emissions} Gt), "
        "while resilience moved {resilience_delta} to {resilience}.",
    ),
    ("moderate", "mature"): (
        "Resilience has moved {resilience_delta} since baseline to {resilience}, the "
        "slowest metric to shift and the hardest to reverse.",
        "Emissions are {emissions_pct} against {baseline_year}, and AI influence has "
        "grown {ai_delta} to {ai}.",
    ),
    ("moderate", "legacy"): (
        "Against the {baseline_year} starting point, GINI reads {gini} ({gini_delta}) "
        "and trust {trust} ({trust_delta}).",
        "Emissions have moved from {baseline_emissions} Gt to {emissions} Gt "
        "({emissions_pct}); AI influence sits at {ai} ({ai_delta}).",
    ),
    ("aggressive", "diverge"): (
        "GINI has fallen {gini_delta} from {baseline_gini} to {gini}, the clearest "
        "trace of the {dividend_pct} dividend.",
        "Emissions are {emissions_pct} against {baseline_year} ({baseline_emissions} Gt "
        "to {emissions} Gt), and trust has moved {trust_delta} to {trust}.",
    ),
    ("aggressive", "mature"): (
        "Since {baseline_year}, emissions have changed {emissions_pct} to {emissions} Gt "
        "and resilience {resilience_delta} to {resilience}.",
        "Trust at {trust} ({trust_delta}) has grown faster than AI influence at {ai} "
        "({ai_delta}).",
    ),
    ("worst", "diverge"): (
        "Trust has moved {trust_delta} from {baseline_trust} to {trust} while GINI "
        "shifted {gini_delta} to {gini}.",
        "Emissions are {emissions} Gt ({emissions_pct} against baseline) and AI "
        "influence has grown {ai_delta} to {ai}.",
    ),
    ("worst", "mature"): (
        "Every normalized metric has moved the wrong way or stalled: GINI {gini_delta}, "
        "trust {trust_delta}, resilience {resilience_delta}.",
        "Emissions stand at {emissions} Gt against {baseline_emissions} Gt in "
        "{baseline_year} ({emissions_pct}).",
    ),
}


# ---------------------------------------------------------------------------
# Actions (bullets)
# ---------------------------------------------------------------------------

ACTIONS: SectionTable = {
    ("aggressive", "dawn"): (
        "A civic dividend of {dividend_pct} of revenue is paid out from the first "
        "budget cycle, aimed squarely at a GINI of {baseline_gini}.",
        "The AI charter is {charter}: audit trails and citizen override powers are "
        "written before automation scales, with AI influence still at {ai}.",
        "{capex_pct} of budget goes to climate capex, front-loading grid and "
        "efficiency work while emissions are {emissions} Gt.",
    ),
    ("aggressive", "diverge"): (
        "Dividend payments at {dividend_pct} are indexed to productivity gains so "
        "automation profits reach households as GINI moves to {gini}.",
        "Charter audits expand from public agencies to the largest private models, "
        "keeping the governance gap at {ai_gap}.",
        "Climate capex at {capex_pct} shifts from generation to storage and grid "
        "orchestration as emissions fall to {emissions} Gt.",
    ),
    ("aggressive", "mature"): (
        "Policy shifts from building to maintaining: the {dividend_pct} dividend "
        "becomes a standing entitlement rather than a program.",
        "The AI charter ({charter}) is revised on a fixed cadence, with citizen "
        "assemblies reviewing systems whose influence now reads {ai}.",
        "Climate spending at {capex_pct} turns to adaptation and ecological "
        "restoration, lifting resilience to {resilience}.",
    ),
    ("aggressive", "legacy"): (
        "The levers set in {baseline_year} ({dividend_pct} dividend, charter {charter}, "
        "{capex_pct} climate capex) are defended rather than expanded.",
        "New action concentrates on keeping trust ({trust}) ahead of automation "
        "({ai}) as a new generation of systems arrives.",
    ),
    ("moderate", "dawn"): (
        "A {dividend_pct} civic dividend is legislated but phased in, reaching "
        "households slowly while GINI reads {gini}.",
        "The AI charter is {charter}; oversight relies on existing regulators while "
        "AI influence is still {ai}.",
        "{capex_pct} of budget is committed to climate investment, roughly in line "
        "with current pledges.",
    ),
    ("moderate", "diverge"): (
        "The dividend at {dividend_pct} survives two budget fights, keeping GINI at "
        "{gini} instead of drifting upward.",
        "Climate capex of {capex_pct} finances renewables at scale while emissions "
        "reach {emissions} Gt.",
        "AI oversight ({charter} charter) is patched sector by sector as the "
        "governance gap reaches {ai_gap}.",
    ),
    ("moderate", "mature"): (
        "Climate investment at {capex_pct} shifts toward adaptation as resilience "
        "settles at {resilience}.",
        "The {dividend_pct} dividend becomes politically untouchable, which protects "
        "GINI at {gini} but limits further reform.",
    ),
    ("moderate", "legacy"): (
        "The policy mix of {baseline_year} ({dividend_pct} dividend, {capex_pct} climate "
        "capex, charter {charter}) has been extended rather than rethought.",
        "Most new action is maintenance: renewing infrastructure and renegotiating the "
        "terms of AI oversight at influence {ai}.",
    ),
    ("bau", "dawn"): (
        "No new redistribution: the dividend stays at {dividend_pct} while GINI "
        "reads {gini}.",
        "The AI charter is {charter}; automation spreads under voluntary commitments "
        "with influence at {ai}.",
        "Climate spending holds at {capex_pct} of budget, enough for headlines but "
        "not for the grid.",
    ),
    ("bau", "diverge"): (
        "Action arrives as emergency response rather than policy, after emissions of "
        "{emissions} Gt translate into disaster spending.",
        "With the charter {charter}, regulators chase deployed systems and the "
        "governance gap reaches {ai_gap}.",
    ),
    ("bau", "mature"): (
        "Adaptation spending crowds out prevention; {capex_pct} of budget is no "
        "longer enough to keep resilience above {resilience}.",
        "Redistribution debates return, but with trust at {trust} no coalition can "
        "hold a dividend above {dividend_pct}.",
    ),
    ("bau", "legacy"): (
        "The levers never moved: {dividend_pct} dividend, {capex_pct} climate capex, "
        "charter {charter}.",
        "What action exists is local and defensive, protecting the communities that "
        "can still afford it.",
    ),
    ("worst", "dawn"): (
        "Existing programs are quietly cut; the dividend sits at {dividend_pct} and "
        "climate capex at {capex_pct}.",
        "The AI charter is {charter}, and early automation gains flow to the owners "
        "of compute while AI influence reads {ai}.",
    ),
    ("worst", "diverge"): (
        "Governments respond to unrest with surveillance rather than reform, pushing "
        "trust to {trust}.",
        "Climate capex at {capex_pct} is diverted to emergency relief as emissions "
        "hold at {emissions} Gt.",
    ),
    ("worst", "mature"): (
        "Policy is crisis management: rationing, border controls and emergency powers "
        "while GINI climbs to {gini}.",
        "Automated systems at influence {ai} are deployed to manage scarcity with no "
        "charter to constrain them.",
    ),
    ("worst", "legacy"): (
        "The remaining institutions act to preserve order, not to change direction.",
        "Restoration efforts exist, but {capex_pct} of a shrunken budget cannot move "
        "emissions of {emissions} Gt.",
    ),
}


# ---------------------------------------------------------------------------
# Employment & economy (bullets)
# ---------------------------------------------------------------------------

EMPLOYMENT: SectionTable = {
    ("moderate", "dawn"): (
        "Headline unemployment still hides a large gig and contract workforce; "
        "GINI at {gini} reflects that split.",
        "AI copilots spread through office work, and with influence at {ai} the "
        "productivity gains have not yet reached wages.",
    ),
    ("moderate", "diverge"): (
        "Reskilling programs absorb part of the automation shock, keeping GINI at "
        "{gini} ({gini_delta} since {baseline_year}).",
        "Green jobs and care work grow fastest, but housing costs still consume a "
        "large share of median income.",
    ),
    ("moderate", "mature"): (
        "The labor market has reorganized around automation at {ai}; the question is "
        "who owns the systems, and GINI of {gini} gives a partial answer.",
        "Care economy roles have become the largest employer in most regions, "
        "supported by the {dividend_pct} dividend.",
    ),
    ("moderate", "legacy"): (
        "Work has been redefined: shorter weeks are common, and GINI at {gini} "
        "reflects a settlement rather than a victory.",
        "Wealth concentration persists at the top even as the floor has risen.",
    ),
    ("aggressive", "dawn"): (
        "The {dividend_pct} dividend cushions early automation layoffs before GINI "
        "({gini}) can climb.",
        "Public investment in retrofits and grid work creates jobs faster than AI "
        "copilots at influence {ai} remove them.",
    ),
    ("aggressive", "diverge"): (
        "GINI at {gini} ({gini_delta}) shows the dividend compounding: households "
        "hold a real share of automation gains.",
        "Care, restoration and energy jobs outgrow displaced roles, and trust at "
        "{trust} reflects it.",
    ),
    ("aggressive", "mature"): (
        "A shorter working week has become normal as productivity from AI at {ai} "
        "is shared rather than captured.",
        "Housing affordability has recovered, a quiet result of GINI holding near "
        "{gini} for a decade.",
    ),
    ("aggressive", "legacy"): (
        "Employment is no longer the main route to security; the dividend and public "
        "services are, with GINI at {gini}.",
        "Economic debate has moved from distribution to purpose: what to do with "
        "time that automation freed.",
    ),
    ("worst", "dawn"): (
        "Automation gains accrue to capital from the start; GINI reads {gini} and "
        "is drifting upward.",
        "Gig work expands to fill the gaps left by shrinking public programs.",
    ),
    ("worst", "diverge"): (
        "GINI has reached {gini} ({gini_delta}), and displaced workers find no "
        "dividend to fall back on.",
        "Housing and food costs rise faster than wages, and trust at {trust} "
        "reflects the anger.",
    ),
    ("worst", "mature"): (
        "A two-tier economy has hardened: those who own automated systems at "
        "influence {ai} and everyone else.",
        "Informal work and barter fill the space where formal employment used to be.",
    ),
    ("worst", "legacy"): (
        "Wealth is concentrated to a degree not seen in a century, with GINI at {gini}.",
        "Economic life is organized around scarcity, and mobility between classes "
        "has all but stopped.",
    ),
}


# ---------------------------------------------------------------------------
# Energy & infrastructure (bullets)
# ---------------------------------------------------------------------------

ENERGY: SectionTable = {
    ("moderate", "dawn"): (
        "Solar and wind keep gaining grid share, but intermittency still leans on "
        "gas peakers; emissions are {emissions} Gt.",
        "Data centers claim a growing slice of electricity demand, and resilience of "
        "{resilience} shows the grid is not built for it yet.",
    ),
    ("moderate", "diverge"): (
        "Virtual power plants coordinate storage and demand response, helping "
        "emissions reach {emissions} Gt ({emissions_pct}).",
        "Grid upgrades funded by {capex_pct} climate capex lift resilience to "
        "{resilience}.",
    ),
    ("moderate", "mature"): (
        "Renewables dominate the grid and the first commercial fusion plants are "
        "online, though small; emissions sit at {emissions} Gt.",
        "Infrastructure resilience of {resilience} reflects a decade of steady, "
        "unspectacular investment.",
    ),
    ("moderate", "legacy"): (
        "The energy system is largely decarbonized, with residual emissions of "
        "{emissions} Gt coming from industry and land use.",
        "Compute has moved partly off-grid and partly into orbit; resilience holds "
        "at {resilience}.",
    ),
    ("aggressive", "dawn"): (
        "{capex_pct} of budget lands in grid storage and transmission within the "
        "first cycles, and emissions begin bending at {emissions} Gt.",
        "Data center growth is tied to clean supply contracts from the outset.",
    ),
    ("aggressive", "diverge"): (
        "Emissions have fallen to {emissions} Gt ({emissions_pct}) as electrified "
        "transport and heat come online.",
        "Distributed storage and virtual power plants lift resilience to {resilience}.",
    ),
    ("aggressive", "mature"): (
        "The fossil era is effectively over; remaining emissions of {emissions} Gt "
        "are being offset by restoration and capture.",
        "Infrastructure resilience at {resilience} means heat waves and storms no "
        "longer take down regional grids.",
    ),
    ("aggressive", "legacy"): (
        "Energy is abundant and clean; emissions of {emissions} Gt are a rounding "
        "error against the {baseline_emissions} Gt of {baseline_year}.",
        "Compute growth is limited by policy choices, not by power supply.",
    ),
    ("bau", "diverge"): (
        "Renewables grow on cost alone, but without grid investment emissions stall "
        "at {emissions} Gt.",
        "Data center demand keeps fossil plants running past their planned "
        "retirement, and resilience sits at {resilience}.",
    ),
    ("bau", "mature"): (
        "The grid is a patchwork of modern and failing assets; outages are routine "
        "and resilience reads {resilience}.",
        "Emissions at {emissions} Gt keep warming on track for well above two degrees.",
    ),
    ("worst", "mature"): (
        "Energy security has replaced decarbonization as the goal; coal returns in "
        "several regions and emissions hold at {emissions} Gt.",
        "Infrastructure resilience of {resilience} means every extreme weather event "
        "becomes a blackout.",
    ),
    ("worst", "legacy"): (
        "Energy access is rationed; emissions of {emissions} Gt persist because no "
        "one can afford to replace the old plants.",
        "Compute is concentrated in fortified facilities with their own supply.",
    ),
}


# ---------------------------------------------------------------------------
# Political climate (bullets)
# ---------------------------------------------------------------------------

POLITICAL: SectionTable = {
    ("moderate", "dawn"): (
        "AI regulation is fragmented across jurisdictions; trust in government "
        "reads {trust}.",
        "Support for carbon pricing is broad but shallow, and the {capex_pct} "
        "climate budget is politically exposed.",
    ),
    ("moderate", "diverge"): (
        "Citizen assemblies gain binding powers in a few countries, nudging trust "
        "{trust_delta} to {trust}.",
        "Regulatory coordination on AI improves unevenly, leaving a governance gap "
        "of {ai_gap}.",
    ),
    ("moderate", "mature"): (
        "Politics is contentious but functional; trust at {trust} supports "
        "compromise without enthusiasm.",
        "Global South demands for climate finance shape every summit.",
    ),
    ("moderate", "legacy"): (
        "Institutions survived the transition, though trust at {trust} shows how "
        "narrowly.",
        "AI oversight has become a permanent political battleground at influence {ai}.",
    ),
    ("aggressive", "dawn"): (
        "The AI charter ({charter}) and dividend become the defining political fight "
        "of the cycle; trust reads {trust}.",
        "Early wins are fragile: a single election could reverse the levers.",
    ),
    ("aggressive", "mature"): (
        "Trust at {trust} makes long-horizon policy possible; opposition argues "
        "over details, not direction.",
        "Participatory audits of AI systems are routine civic practice.",
    ),
    ("bau", "diverge"): (
        "Polarization deepens as climate costs land unevenly; trust slides to {trust}.",
        "AI regulation arrives only after scandals, leaving a governance gap of {ai_gap}.",
    ),
    ("bau", "legacy"): (
        "Politics has become a contest over shrinking resources; trust at {trust} "
        "limits what any government can attempt.",
        "International coordination has given way to regional blocs.",
    ),
    ("worst", "dawn"): (
        "Misinformation and tribal epistemology erode consensus early; trust reads "
        "{trust}.",
        "No coalition forms around the AI charter, which stays {charter}.",
    ),
    ("worst", "diverge"): (
        "Trust has fallen {trust_delta} to {trust}, and emergency powers become "
        "normal governance.",
        "Concentrated control of AI at influence {ai} turns political competition "
        "into a contest over infrastructure.",
    ),
    ("worst", "mature"): (
        "Democratic institutions exist in form more than function; trust at {trust} "
        "cannot sustain them.",
        "Climate displacement drives border conflicts and nationalist politics.",
    ),
    ("worst", "legacy"): (
        "Governance is fragmented into fortified enclaves; trust reads {trust}.",
        "No authority commands enough legitimacy to change the trajectory.",
    ),
}


# ---------------------------------------------------------------------------
# AI influence (bullets)
# ---------------------------------------------------------------------------

AI_INFLUENCE: SectionTable = {
    ("moderate", "dawn"): (
        "AI influence of {ai} means copilots in most offices but few decisions "
        "fully delegated.",
        "The governance gap (AI influence minus trust) is {ai_gap}, still inside "
        "the range institutions can absorb.",
    ),
    ("moderate", "diverge"): (
        "AI at {ai} now shapes hiring, lending and public services; trust at "
        "{trust} determines whether that feels like help or control.",
        "The governance gap of {ai_gap} is the main risk on this branch.",
    ),
    ("moderate", "mature"): (
        "Automation at {ai} is ordinary infrastructure; oversight is partial and "
        "the governance gap reads {ai_gap}.",
        "Public debate centers on accountability when automated systems fail.",
    ),
    ("moderate", "legacy"): (
        "With AI influence at {ai}, most routine decisions are automated; trust of "
        "{trust} keeps the arrangement legitimate.",
        "The governance gap of {ai_gap} has stabilized rather than closed.",
    ),
    ("aggressive", "diverge"): (
        "AI at {ai} operates under charter audits; the governance gap of {ai_gap} "
        "shows oversight keeping pace.",
        "Open weights and public compute co-ops keep capability from concentrating.",
    ),
    ("aggressive", "legacy"): (
        "AI influence at {ai} is deep but accountable; citizens hold real override "
        "powers.",
        "The governance gap of {ai_gap} is a measure of vigilance now, not of risk.",
    ),
    ("worst", "diverge"): (
        "AI influence of {ai} against trust of {trust} leaves a governance gap of "
        "{ai_gap}; automated systems optimize for their owners.",
        "Deep fakes and automated persuasion fracture the shared facts politics "
        "depends on.",
    ),
    ("worst", "mature"): (
        "At {ai}, AI systems run logistics, policing and information with no "
        "effective oversight.",
        "The governance gap of {ai_gap} is the clearest single measure of how "
        "this branch failed.",
    ),
}


# ---------------------------------------------------------------------------
# Next steps (bullets)
# ---------------------------------------------------------------------------

NEXT_STEPS: SectionTable = {
    ("moderate", "dawn"): (
        "Civic trust is {trust}, so invest in participatory audits now while "
        "AI influence is only {ai}.",
        "Emissions are {emissions} Gt; accelerate grid storage before demand from "
        "compute locks in fossil capacity.",
    ),
    ("moderate", "diverge"): (
        "The governance gap stands at {ai_gap}; tie any further AI deployment in "
        "public services to charter-style audits.",
        "Resilience is {resilience}; move climate capex from generation toward "
        "adaptation in exposed regions.",
    ),
    ("moderate", "mature"): (
        "GINI is {gini}; index the {dividend_pct} dividend to automation "
        "productivity to protect it.",
        "Emissions at {emissions} Gt leave residual industrial sources; target them "
        "directly.",
    ),
    ("moderate", "legacy"): (
        "Trust is {trust}; institutionalize citizen assemblies so oversight does not "
        "depend on political cycles.",
        "Resilience at {resilience} should be defended with maintenance budgets, not "
        "one-off programs.",
    ),
    ("aggressive", "dawn"): (
        "Trust at {trust} is the binding constraint; communicate dividend results "
        "early and often.",
        "Emissions are {emissions} Gt; keep capex at {capex_pct} through the first "
        "downturn.",
    ),
    ("aggressive", "diverge"): (
        "The governance gap is {ai_gap}; expand charter audits to private systems "
        "before influence passes {ai}.",
        "Resilience of {resilience} has spare capacity; use it to restore ecosystems "
        "rather than just infrastructure.",
    ),
    ("aggressive", "mature"): (
        "GINI at {gini} is a success to protect; guard the dividend against "
        "erosion by inflation.",
        "Trust of {trust} allows long-horizon commitments; lock in climate targets "
        "beyond {year}.",
    ),
    ("aggressive", "legacy"): (
        "AI influence is {ai}; renew the charter for the next generation of systems.",
        "Emissions at {emissions} Gt make drawdown the next goal.",
    ),
    ("bau", "dawn"): (
        "Emissions are {emissions} Gt; even a modest increase above {capex_pct} "
        "climate capex changes the decade.",
        "Trust is {trust}; a small civic dividend is the cheapest way to raise it.",
    ),
    ("bau", "diverge"): (
        "The governance gap is {ai_gap}; introduce binding AI audits before it widens.",
        "GINI is {gini}; a dividend above {dividend_pct} would slow the drift.",
    ),
    ("bau", "mature"): (
        "Resilience is {resilience}; prioritize adaptation where exposure is highest.",
        "Trust at {trust} limits ambition; start with transparent, local programs.",
    ),
    ("bau", "legacy"): (
        "Emissions remain at {emissions} Gt; any lever is better than none.",
        "Trust is {trust}; rebuild it through visible, local wins before attempting "
        "national reform.",
    ),
    ("worst", "dawn"): (
        "Trust is {trust}; protect independent institutions before they erode.",
        "Emissions are {emissions} Gt; the cheapest decade to act is this one.",
    ),
    ("worst", "diverge"): (
        "The governance gap is {ai_gap}; demand audit rights over automated systems "
        "now, while they can still be granted.",
        "GINI is {gini}; direct transfers are the fastest way to arrest the slide.",
    ),
    ("worst", "mature"): (
        "Resilience is {resilience}; focus on keeping water, food and power systems "
        "running locally.",
        "Trust at {trust} rules out national programs; build mutual aid networks.",
    ),
    ("worst", "legacy"): (
        "Emissions at {emissions} Gt and GINI at {gini} describe a world to rebuild "
        "from the ground up.",
        "Preserve knowledge and institutions that a future reset could use.",
    ),
}


TEMPLATES: dict[SectionKey, SectionTable] = {
    SectionKey.summary: SUMMARY,
    SectionKey.status_quo: STATUS_QUO,
    SectionKey.baseline: BASELINE,
    SectionKey.actions: ACTIONS,
    SectionKey.employment: EMPLOYMENT,
    SectionKey.energy: ENERGY,
    SectionKey.political: POLITICAL,
    SectionKey.ai: AI_INFLUENCE,
    SectionKey.next_steps: NEXT_STEPS,
}


def select_template(
    section: SectionKey,
    scenario_id: str,
    era: Era,
    default_scenario: str = DEFAULT_SCENARIO,
) -> tuple[str, tuple[str, ...]]:
    """Return (scenario whose phrasing is used, template lines).

    Lookup order is the scenario itself, then *default_scenario*, then the
    built-in ``DEFAULT_SCENARIO`` table, which covers every section and era.
    Raises TemplateLookupError only if all three are missing.
    """
    table = TEMPLATES[section]
    lines = table.get((scenario_id, era.value))
    if lines is not None:
        return scenario_id, lines

    for candidate in dict.fromkeys((default_scenario, DEFAULT_SCENARIO)):
        fallback = table.get((candidate, era.value))
        if fallback is not None:
            logger.debug(
                "No %s template for (%s, %s); using %s phrasing",
                section.value, scenario_id, era.value, candidate,
            )
            return candidate, fallback

    raise TemplateLookupError(
        f"No {section.value} template for {scenario_id!r}, {default_scenario!r} "
        f"or {DEFAULT_SCENARIO!r} in era {era.value!r}"
    )
