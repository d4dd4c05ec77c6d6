"""Government scheme catalog (central and Andhra Pradesh state schemes)."""

from __future__ import annotations

from typing import Tuple

from ..schemas.models import Scheme, SchemeLink


CENTRAL_SCHEMES: Tuple[Scheme, ...] = (
    Scheme(
        name="PM-KISAN (Pradhan Mantri Kisan Samman Nidhi)",
        benefit="₹6,000 per year in 3 installments.",
        eligibility="Land-owning farmers (excluding income tax payers).",
        apply_process=[
            "Go to the official PM-KISAN website.",
            'Click on "New Farmer Registration".',
            "Enter Aadhaar, mobile, and bank details.",
            "Submit land record documents (Patta/Khata).",
        ],
        link=SchemeLink(url="https://pmkisan.gov.in", text="Check PM-Kisan Status"),
    ),
    Scheme(
        name="PMFBY (Pradhan Mantri Fasal Bima Yojana)",
        benefit="Crop insurance at a low premium of 1.5–5%.",
        eligibility="All farmers with insurable crops. Mandatory if a crop loan is taken.",
        apply_process=[
            "Visit the PMFBY portal.",
            'Click on "Farmer Corner" → "Apply for Crop Insurance".',
            "Select state, season, crop, and fill in Aadhaar and land details.",
        ],
        link=SchemeLink(url="https://pmfby.gov.in", text="Track Application Status"),
    ),
    Scheme(
        name="Kisan Credit Card (KCC)",
        benefit="Crop loans up to ₹3 lakh at a subsidized 4% interest rate.",
        eligibility="Cultivating farmers, tenant farmers, or those in allied sectors.",
        apply_process=[
            "Download the KCC Form from the PM-KISAN website or a bank branch.",
            "Fill and submit it to your nearest bank with Aadhaar and land documents.",
            "Alternatively, apply via a Common Service Centre (CSC).",
        ],
        link=SchemeLink(url="https://pmkisan.gov.in/KCC.aspx", text="Download KCC Form"),
    ),
    Scheme(
        name="PM-KUSUM (Solar Pump Subsidy Scheme)",
        benefit="30–60% subsidy on solar pump installation for irrigation.",
        eligibility="Farmers with grid access or land for off-grid pumps.",
        apply_process=[
            "Visit your state-specific KUSUM portal or the central MNRE site.",
            "Register using Aadhaar and land documents.",
            "Choose pump capacity and a registered vendor.",
        ],
        link=SchemeLink(url="https://mnre.gov.in/solar/schemes", text="Visit MNRE Site"),
    ),
    Scheme(
        name="eNAM (National Agriculture Market)",
        benefit="Sell crops directly in over 1000 APMCs (mandis) digitally.",
        eligibility="Farmers registered with an APMC and with valid KYC.",
        apply_process=[
            "Visit the eNAM website to begin registration.",
            'Click on "Farmer Registration".',
            "Upload KYC, bank, and land details.",
            "Receive a unique ID to trade crops online or via the mobile app.",
        ],
        link=SchemeLink(url="https://enam.gov.in", text="Register on eNAM"),
    ),
    Scheme(
        name="Soil Health Card Scheme",
        benefit="Free soil testing and customized fertilizer recommendations every 2 years.",
        eligibility="All farmers are eligible to get a soil health card.",
        apply_process=[
            "Contact your local agriculture office or Village Level Worker/Krishi Sahayak.",
            "They will collect a soil sample from your farm.",
            "The sample is sent to a lab for testing, and the card is delivered to you.",
        ],
        link=SchemeLink(url="https://soilhealth.dac.gov.in", text="Find Your Soil Health Card"),
    ),
    Scheme(
        name="NABARD Subsidy Schemes",
        benefit="25–50% capital subsidy for agri-infrastructure like cold storage, drip irrigation, dairy, etc.",
        eligibility="Varies by scheme; includes individual farmers, FPOs, and agri-entrepreneurs.",
        apply_process=[
            "Visit the official NABARD website to see available schemes.",
            "Prepare a detailed project report (DPR) for your venture.",
            "Apply for a bank loan; the bank will then process the subsidy claim from NABARD.",
        ],
        link=SchemeLink(url="https://www.nabard.org", text="Explore NABARD Schemes"),
    ),
    Scheme(
        name="PM Krishi Sinchai Yojana (PMKSY)",
        benefit="Subsidies for micro-irrigation and water conservation systems such as drip/sprinkler irrigation.",
        eligibility="All farmers and farmer groups.",
        apply_process=[
            "Visit the official PMKSY website.",
            "Contact local agriculture/horticulture department for application procedures in your area.",
        ],
        link=SchemeLink(url="https://pmksy.gov.in", text="Visit PMKSY Portal"),
    ),
    Scheme(
        name="Rashtriya Krishi Vikas Yojana (RKVY)",
        benefit="Funding and grants for agricultural development, infrastructure, technology adoption, and agri-entrepreneurship.",
        eligibility="Eligible agricultural stakeholders and farmer groups under state-specific criteria.",
        apply_process=[
            "Contact your respective state agriculture department for details on ongoing projects and application processes.",
        ],
        link=SchemeLink(url="https://rkvy.nic.in", text="Learn More on RKVY"),
    ),
    Scheme(
        name="National Bamboo Mission",
        benefit="Support for bamboo cultivation, product development, and market linkages.",
        eligibility="Farmers, growers, and entrepreneurs interested in the bamboo sector.",
        apply_process=[
            "Contact your state forestry or bamboo mission offices for guidance on nurseries and subsidies.",
        ],
        link=SchemeLink(url="https://nbm.nic.in", text="Visit Bamboo Mission Site"),
    ),
    Scheme(
        name="Paramparagat Krishi Vikas Yojana (PKVY)",
        benefit="Support for organic farming clusters, certification, and market access.",
        eligibility="Farmer groups and cooperatives adopting organic farming practices.",
        apply_process=[
            "Register with your state agriculture or organic certification agencies.",
        ],
        link=SchemeLink(url="https://pgsindia-ncof.gov.in", text="Organic Farming Portal"),
    ),
    Scheme(
        name="Agriculture Infrastructure Fund (AIF)",
        benefit="Loans with interest subvention for building warehouses, cold storage, processing units, and supply chain infrastructure.",
        eligibility="Farmer Producer Organizations (FPOs), cooperatives, startups, and agri-entrepreneurs.",
        apply_process=[
            "Apply for loans through designated banks and financial institutions, which will process the subvention.",
        ],
        link=SchemeLink(url="https://agriinfra.dac.gov.in", text="Explore AIF"),
    ),
    Scheme(
        name="Pradhan Mantri Matsya Sampada Yojana (PMMSY)",
        benefit="Support for fisheries and aquaculture sector including infrastructure, equipment subsidy, and marketing.",
        eligibility="Fisherfolk, fish farmers, and entrepreneurs in the fisheries domain.",
        apply_process=[
            "Visit the official PMMSY website.",
            "Applications are typically processed through state fisheries departments.",
        ],
        link=SchemeLink(url="https://pmmsy.dof.gov.in", text="Visit Fisheries Portal"),
    ),
)

STATE_SCHEMES: Tuple[Scheme, ...] = (
    Scheme(
        name="Annadata Sukhibhava Scheme (AP)",
        benefit="₹20,000 per year financial aid to farmers to support agricultural needs (e.g., inputs like seeds, fertilizers).",
        eligibility="Permanent residents of Andhra Pradesh who are farmers; income taxpayers, government employees, and pensioners above ₹10,000 excluded.",
        apply_process=[
            "Visit the official scheme website to register and check beneficiary status.",
            "Submit Aadhaar, land documents, and other required proofs.",
            "Contact nearest Rythu Sewa Kendra for assistance and grievance redressal.",
        ],
        link=SchemeLink(url="https://annadathasukhibhava.ap.gov.in", text="Visit Scheme Portal"),
    ),
    Scheme(
        name="YSR Rythu Bharosa (AP)",
        benefit="₹13,500 per year per farmer family (₹7,500 state contribution + ₹6,000 central PM-KISAN).",
        eligibility="Land-owning farmers and tenant farmers with minimum leased land; disqualifications for government employees, income taxpayers.",
        apply_process=[
            "Beneficiaries are identified via the government's land records database.",
            "Check status or file a grievance at official state portals or nearest agricultural offices.",
        ],
        link=SchemeLink(url="https://apagrisnet.gov.in", text="Visit AP Agriculture Portal"),
    ),
    Scheme(
        name="YSR Jala Kala Scheme (AP)",
        benefit="Free borewell drilling to eligible farmers lacking irrigation facilities for water security.",
        eligibility="Farmers without borewells having at least 2.5 acres of continuous land.",
        apply_process=[
            "Apply at designated government offices or through the online portal.",
            "Required documents include land records, Aadhaar, and identity proofs.",
        ],
        link=SchemeLink(url="https://ysrjalakala.ap.gov.in", text="Apply for YSR Jala Kala"),
    ),
    Scheme(
        name="State Crop Insurance Scheme (AP)",
        benefit="Free or subsidized crop insurance for natural calamities, covering losses to farmers on specified crops.",
        eligibility="All farmers in Andhra Pradesh growing insurable crops.",
        apply_process=[
            "Registration is typically facilitated at village or Mandal agriculture offices before the sowing season.",
        ],
        link=SchemeLink(url="https://apagrisnet.gov.in", text="Check with Local Agri Dept"),
    ),
    Scheme(
        name="National Food Security Mission (NFSM - AP)",
        benefit="Financial support and subsidies for increasing foodgrain production and productivity through improved seeds, training, and infrastructure.",
        eligibility="Farmer groups and individuals growing specified food grains.",
        apply_process=[
            "Contact your district agriculture office for details on active components.",
            "Visit the AP Seeds portal for updates on seed subsidies and applications.",
        ],
        link=SchemeLink(url="https://apseeds.ap.gov.in", text="Visit AP Seeds Portal"),
    ),
    Scheme(
        name="MIDH - Horticulture Mission (AP)",
        benefit="Financial assistance for horticulture crop cultivation, post-harvest management, and marketing infrastructure.",
        eligibility="Eligible horticulture growers and farmer groups.",
        apply_process=[
            "Contact the Andhra Pradesh Horticulture Department for scheme guidelines.",
            "Check the official horticulture portal for application forms and notifications.",
        ],
        link=SchemeLink(url="http://horticulture.ap.nic.in", text="Visit AP Horticulture Dept"),
    ),
    Scheme(
        name="Dairy Development Schemes (AP)",
        benefit="Subsidies for purchase of milch animals, improved feed, veterinary services, and infrastructure (milk chilling units, diary plants).",
        eligibility="Small, marginal farmers and dairy entrepreneurs in AP.",
        apply_process=[
            "Contact the Andhra Pradesh Dairy Development Department or local veterinary offices.",
            "Applications typically open periodically with scheme announcements.",
        ],
        link=SchemeLink(url="http://apdairy.gov.in", text="Visit AP Dairy Dept"),
    ),
    Scheme(
        name="Fisheries & Aquaculture Schemes (PMMSY - AP)",
        benefit="Infrastructure and technology support, financial assistance for fish farmers and fishermen (cold storage, hatcheries, mechanized boats).",
        eligibility="Registered fishermen, fish farmers, and related entrepreneurs.",
        apply_process=[
            "Visit the central PMMSY website for guidelines.",
            "Apply via the state fisheries department or local aquaculture offices.",
        ],
        link=SchemeLink(url="https://pmmsy.dof.gov.in", text="Visit Fisheries Portal"),
    ),
    Scheme(
        name="Sericulture Development Schemes (AP)",
        benefit="Subsidies and training for mulberry cultivation, silkworm rearing, silk production infrastructure, and market access.",
        eligibility="Farmers engaged or interested in sericulture in AP.",
        apply_process=[
            "Approach the Sericulture Department of Andhra Pradesh for details.",
            "Submit applications with land and ID proofs when schemes are announced.",
        ],
        link=SchemeLink(url="https://apsericulture.ap.gov.in", text="Visit AP Sericulture Dept"),
    ),
)

ALL_SCHEMES: Tuple[Scheme, ...] = CENTRAL_SCHEMES + STATE_SCHEMES
