"""Curated long-form service copy.

Each entry is validated into a :class:`~landing.models.service_content.ServiceContentEntry`
by the content store.  Prose refers to the region as "Utah"; location
templating replaces that token with the requested city.
"""

SERVICE_CONTENT = (
    {
        "slug": "roofing-residential",
        "title": "Residential Roofing Services",
        "meta_description": (
            "Professional residential roofing installation, repair, and replacement services "
            "in Utah. Licensed, insured, and warranty-backed roofing solutions."
        ),
        "keywords": [
            "residential roofing", "roof installation", "roof repair", "roof replacement",
            "asphalt shingles", "metal roofing", "roofing contractor", "storm damage repair",
        ],
        "long_description": (
            "Your home's roof is its first line of defense against Utah's diverse weather, "
            "from heavy winter snowfall to intense summer heat and the occasional severe storm. "
            "We provide residential roofing solutions that protect your family and your investment.\n\n"
            "Our roofing services cover everything from minor repairs to complete replacements. "
            "We work with premium materials from trusted manufacturers and follow or exceed "
            "manufacturer specifications and local building codes on every installation.\n\n"
            "Every project starts with a thorough inspection and a written report of our findings. "
            "When storms hit, our rapid response team provides temporary protection while we plan "
            "a permanent repair."
        ),
        "short_description": (
            "Expert residential roofing services including installation, repair, and replacement "
            "with premium materials and warranty protection."
        ),
        "benefits": [
            "Protect your home from Utah's extreme weather conditions",
            "Increase property value with premium roofing materials",
            "Reduce energy costs with efficient roofing systems",
            "Comprehensive warranty coverage for peace of mind",
            "Emergency repair services available 24/7",
            "Free inspections and detailed estimates",
        ],
        "process": [
            {"step": 1, "title": "Initial Inspection & Assessment", "description": "We document current conditions, identify issues, and assess structural integrity.", "duration": "1-2 hours"},
            {"step": 2, "title": "Detailed Estimate & Planning", "description": "A written estimate covering materials, labor, timeline, and warranty, with material samples.", "duration": "24-48 hours"},
            {"step": 3, "title": "Professional Installation", "description": "Our certified crew removes old materials and installs your new roof.", "duration": "1-3 days"},
            {"step": 4, "title": "Final Inspection & Cleanup", "description": "Final inspection, magnetic sweep cleanup, and warranty documentation.", "duration": "Half day"},
        ],
        "problems_solved": [
            "Leaks and water damage from worn or missing shingles",
            "Ice dams and snow load damage after harsh winters",
            "High energy bills from poor roof ventilation",
            "Storm and hail damage requiring insurance documentation",
        ],
        "why_choose_us": [
            "Certified roofing professionals with years of local experience",
            "Transparent communication from inspection to cleanup",
            "Manufacturer-backed warranties on materials and workmanship",
        ],
        "faqs": [
            {"question": "How long does a roof replacement take?", "answer": "Most residential roof replacements are completed in 1-3 days depending on size, pitch, and weather.", "category": "timeline"},
            {"question": "Do you work with insurance companies?", "answer": "Yes. We document storm damage and work directly with your insurer throughout the claim.", "category": "insurance"},
            {"question": "What roofing materials do you recommend for Utah?", "answer": "Architectural shingles and metal roofing both perform well in Utah's freeze-thaw cycles; we help you weigh cost and longevity.", "category": "materials"},
        ],
        "call_to_actions": [
            {"type": "phone", "text": "Call for Emergency Roof Repair", "description": "Storm damage or an active leak? Call now for rapid response.", "urgency": "Available 24/7"},
            {"type": "estimate", "text": "Get Your Free Roofing Estimate", "description": "Schedule a free inspection and receive a detailed written estimate."},
        ],
        "related_slugs": [
            "gutter-installation", "siding-installation", "window-replacement",
            "solar-panel-installation", "insulation-services", "exterior-painting",
        ],
        "service_features": [
            {"icon": "shield", "title": "Weather Protection", "description": "Roofing systems designed for heavy snow loads and summer heat."},
            {"icon": "clock", "title": "Emergency Service", "description": "Rapid response for storm damage and urgent leaks."},
        ],
        "price_range": "$8,000 - $25,000",
        "timeline": "1-3 days",
        "warranty": "Up to 50 years materials, 25 years workmanship",
        "materials": ["Asphalt Shingles", "Metal Roofing", "Tile Roofing", "Underlayment", "Ventilation Systems"],
        "certifications": ["GAF Master Elite", "State Licensed Contractor", "Better Business Bureau A+"],
    },
    {
        "slug": "kitchen-remodeling",
        "title": "Kitchen Remodeling Services",
        "meta_description": (
            "Transform your kitchen with professional remodeling services in Utah. Custom designs, "
            "quality craftsmanship, and complete project management from planning to completion."
        ),
        "keywords": [
            "kitchen remodeling", "kitchen renovation", "custom kitchens", "kitchen design",
            "cabinet installation", "countertops", "kitchen islands", "backsplash installation",
        ],
        "long_description": (
            "The kitchen is the heart of your home, where families gather, meals are prepared, and "
            "memories are made. We transform outdated or inefficient kitchens into beautiful, "
            "functional spaces that reflect your lifestyle and add value to your Utah home.\n\n"
            "We begin each project with an in-depth consultation to understand your needs, budget, "
            "and timeline, then create a layout that maximizes function while matching your style.\n\n"
            "Our team manages electrical work, plumbing modifications, flooring, cabinetry, "
            "countertops, backsplash, lighting, and appliance integration, coordinating every trade "
            "so your renovation finishes on schedule."
        ),
        "short_description": (
            "Complete kitchen remodeling services including design, cabinetry, countertops, "
            "flooring, and appliance installation."
        ),
        "benefits": [
            "Increase home value with a professionally designed kitchen",
            "Improve functionality and workflow for daily cooking tasks",
            "Enhance energy efficiency with modern appliances and lighting",
            "Create additional storage with custom cabinet solutions",
            "Warranty protection on all materials and workmanship",
            "Professional project management from start to finish",
        ],
        "process": [
            {"step": 1, "title": "Design Consultation & Planning", "description": "We discuss your vision and budget, then create detailed design plans with 3D renderings.", "duration": "1-2 weeks"},
            {"step": 2, "title": "Permits & Material Ordering", "description": "We obtain permits and order all materials so installation runs without delays.", "duration": "2-4 weeks"},
            {"step": 3, "title": "Demolition & Infrastructure", "description": "Careful removal of existing elements followed by electrical and plumbing work.", "duration": "3-7 days"},
            {"step": 4, "title": "Installation & Finishing", "description": "Cabinets, countertops, backsplash, flooring, and appliances installed with precision.", "duration": "1-2 weeks"},
            {"step": 5, "title": "Final Walkthrough", "description": "Quality inspection, cleanup, and a walkthrough to confirm your satisfaction.", "duration": "1 day"},
        ],
        "problems_solved": [
            "Outdated layouts that limit functionality and workflow",
            "Insufficient storage space for modern kitchen needs",
            "Worn-out cabinets, countertops, and appliances",
            "Lack of counter space for meal preparation and entertaining",
        ],
        "why_choose_us": [
            "Comprehensive design services with 3D visualization",
            "Expert project management coordinating all trades",
            "Licensed electricians and plumbers on staff",
        ],
        "faqs": [
            {"question": "How long does a typical kitchen remodel take?", "answer": "Most kitchen remodels take 4-8 weeks depending on scope, custom elements, and material availability.", "category": "timeline"},
            {"question": "Can I use my kitchen during the renovation?", "answer": "There will be periods when the kitchen is unusable; we help you plan temporary cooking arrangements.", "category": "logistics"},
            {"question": "Do you handle permits and inspections?", "answer": "Yes, we pull all permits, schedule inspections, and make sure the work meets local codes.", "category": "permits"},
        ],
        "call_to_actions": [
            {"type": "consultation", "text": "Schedule Your Design Consultation", "description": "Meet with our designers to explore possibilities for your kitchen."},
            {"type": "estimate", "text": "Get Your Free Kitchen Estimate", "description": "Receive a detailed estimate with design concepts and material options."},
        ],
        "related_slugs": [
            "bathroom-remodeling", "flooring-installation", "electrical-services",
            "plumbing-services", "interior-painting", "home-additions",
        ],
        "service_features": [
            {"icon": "palette", "title": "Custom Design Service", "description": "3D design visualization and custom layout planning."},
            {"icon": "tools", "title": "Complete Project Management", "description": "We coordinate all trades, materials, and timelines."},
        ],
        "price_range": "$25,000 - $75,000",
        "timeline": "4-8 weeks",
        "warranty": "2-5 years workmanship, full manufacturer warranties",
        "materials": ["Custom Cabinetry", "Granite/Quartz Countertops", "Tile Backsplash", "Hardwood/Luxury Vinyl Flooring", "LED Lighting"],
        "certifications": ["State Licensed Contractor", "Electrical License", "Plumbing License"],
    },
    {
        "slug": "bathroom-remodeling",
        "title": "Bathroom Remodeling Services",
        "meta_description": (
            "Professional bathroom renovation services in Utah including design, plumbing, tiling, "
            "and fixture installation. Transform your bathroom into a luxurious retreat."
        ),
        "keywords": [
            "bathroom remodeling", "bathroom renovation", "shower installation", "tile work",
            "vanity installation", "walk-in shower", "accessible bathroom",
        ],
        "long_description": (
            "A well-designed bathroom combines comfort, function, and style. We renovate dated and "
            "cramped bathrooms across Utah into bright, efficient spaces built to last.\n\n"
            "From a simple fixture refresh to a full gut renovation, we handle design, plumbing, "
            "electrical, waterproofing, tile, and finish carpentry with one accountable team.\n\n"
            "We also specialize in accessibility upgrades such as curbless showers, grab bars, and "
            "comfort-height fixtures that let you stay in your home with confidence."
        ),
        "short_description": (
            "Complete bathroom renovation services including design, plumbing, tiling, fixtures, "
            "and accessibility modifications."
        ),
        "benefits": [
            "Create a spa-like retreat in your own home",
            "Improve water efficiency with modern fixtures",
            "Prevent water damage with professional waterproofing",
            "Add accessibility features for aging in place",
            "Increase resale value with an updated bathroom",
        ],
        "process": [
            {"step": 1, "title": "Design & Selections", "description": "We plan the layout and help you choose tile, fixtures, and vanities.", "duration": "1-2 weeks"},
            {"step": 2, "title": "Demolition & Rough-In", "description": "Old finishes are removed and plumbing and electrical are updated.", "duration": "3-5 days"},
            {"step": 3, "title": "Waterproofing & Tile", "description": "Membranes are installed and tile is set to exacting standards.", "duration": "1 week"},
            {"step": 4, "title": "Fixtures & Final Touches", "description": "Vanities, fixtures, glass, and accessories are installed and tested.", "duration": "2-4 days"},
        ],
        "problems_solved": [
            "Leaks and hidden water damage behind old tile",
            "Cramped layouts with poor storage",
            "Slippery or inaccessible tubs and showers",
        ],
        "why_choose_us": [
            "Licensed plumbers and electricians on every project",
            "Proven waterproofing systems backed by warranty",
            "Clean, respectful crews who protect your home",
        ],
        "faqs": [
            {"question": "How long does a bathroom remodel take?", "answer": "Most bathroom remodels are completed in 2-4 weeks once materials are on site.", "category": "timeline"},
            {"question": "Can you convert a tub to a walk-in shower?", "answer": "Yes, tub-to-shower conversions are one of our most requested projects.", "category": "design"},
        ],
        "call_to_actions": [
            {"type": "estimate", "text": "Get Your Free Bathroom Estimate", "description": "Tell us about your bathroom and receive a detailed quote."},
        ],
        "related_slugs": [
            "kitchen-remodeling", "plumbing-services", "electrical-services",
            "flooring-installation", "interior-painting", "home-additions",
        ],
        "service_features": [
            {"icon": "droplet", "title": "Waterproofing Experts", "description": "Proven membrane systems that keep water where it belongs."},
        ],
        "price_range": "$15,000 - $40,000",
        "timeline": "2-4 weeks",
        "warranty": "2-5 years workmanship, manufacturer warranties on fixtures",
        "materials": ["Porcelain/Ceramic Tile", "Natural Stone", "Custom Vanities", "Quality Fixtures", "LED Lighting"],
        "certifications": ["Licensed Plumbing", "Licensed Electrical", "State Contractor License"],
    },
    {
        "slug": "home-additions",
        "title": "Home Addition Services",
        "meta_description": (
            "Expand your living space with professional home additions in Utah. Room additions, "
            "second stories, and custom expansions designed to match your existing home."
        ),
        "keywords": [
            "home additions", "room addition", "second story addition", "home expansion",
            "garage conversion", "sunroom addition",
        ],
        "long_description": (
            "When your family outgrows your home, an addition lets you gain space without leaving "
            "the neighborhood you love. We design and build additions that look like they were "
            "always part of your Utah home.\n\n"
            "Our team handles architectural design, engineering, permitting, foundations, framing, "
            "roofing, and interior finishes, matching exterior materials so the addition blends in."
        ),
        "short_description": (
            "Professional home additions including room additions, second stories, and custom "
            "expansions that integrate seamlessly with your existing home."
        ),
        "benefits": [
            "Gain living space without the cost of moving",
            "Seamless integration with your existing architecture",
            "Increase property value with quality construction",
            "Single point of contact from design to final inspection",
        ],
        "process": [
            {"step": 1, "title": "Feasibility & Design", "description": "We review zoning, setbacks, and structure, then design your addition.", "duration": "2-6 weeks"},
            {"step": 2, "title": "Engineering & Permits", "description": "Structural engineering and permit approval.", "duration": "3-8 weeks"},
            {"step": 3, "title": "Construction", "description": "Foundation, framing, roofing, mechanicals, and finishes.", "duration": "2-6 months"},
        ],
        "problems_solved": [
            "Not enough bedrooms or living space for a growing family",
            "No room for a home office or guest suite",
            "High cost and disruption of moving",
        ],
        "why_choose_us": [
            "Licensed general contractor with structural engineering partners",
            "Exterior materials matched to your existing home",
            "Detailed schedules with regular progress updates",
        ],
        "faqs": [
            {"question": "Do I need a permit for a home addition?", "answer": "Yes. We prepare plans and manage the full permitting process with your city.", "category": "permits"},
            {"question": "Can I stay in my home during construction?", "answer": "In most cases yes; we isolate the work area to keep dust and noise down.", "category": "logistics"},
        ],
        "call_to_actions": [
            {"type": "consultation", "text": "Plan Your Home Addition", "description": "Schedule a feasibility consultation with our design team."},
        ],
        "related_slugs": [
            "foundation-services", "roofing-residential", "electrical-services",
            "plumbing-services", "flooring-installation", "interior-painting",
        ],
        "service_features": [],
        "price_range": "$50,000 - $200,000+",
        "timeline": "3-8 months",
        "warranty": "10 years structural, 2-5 years workmanship",
        "materials": ["Matching Siding/Exterior", "Quality Framing Materials", "Energy-Efficient Windows", "Insulation Systems"],
        "certifications": ["State Licensed General Contractor", "Structural Engineering Partners", "Building Code Certified"],
    },
    {
        "slug": "deck-building",
        "title": "Deck Building & Installation",
        "meta_description": (
            "Custom deck construction and installation services. Composite, wood, and multi-level "
            "decks built to last with professional craftsmanship."
        ),
        "keywords": [
            "deck building", "deck installation", "composite decking", "wood deck",
            "deck contractor", "multi-level deck",
        ],
        "long_description": (
            "A custom deck extends your living space outdoors and makes the most of Utah's long "
            "summer evenings. We design and build decks sized for the way you entertain.\n\n"
            "Choose from low-maintenance composite, cedar, or pressure-treated lumber. Every deck is "
            "built on properly engineered footings with stainless hardware and code-compliant railings."
        ),
        "short_description": (
            "Professional deck construction and installation services using quality materials and "
            "expert craftsmanship for long-lasting outdoor living spaces."
        ),
        "benefits": [
            "Expand your usable living space outdoors",
            "Low-maintenance composite options",
            "Engineered footings for long-term stability",
            "Custom designs including multi-level layouts",
        ],
        "process": [
            {"step": 1, "title": "Design & Material Selection", "description": "We design your deck and help you choose decking and railing.", "duration": "1 week"},
            {"step": 2, "title": "Permits & Footings", "description": "Permits are pulled and footings are poured and inspected.", "duration": "1-2 weeks"},
            {"step": 3, "title": "Framing & Decking", "description": "Framing, decking, stairs, and railings are installed.", "duration": "3-7 days"},
        ],
        "problems_solved": [
            "Rotting or unsafe existing decks",
            "Unused backyard space",
            "Lack of outdoor entertaining areas",
        ],
        "why_choose_us": [
            "Manufacturer-trained composite installers",
            "Code-compliant construction and inspections",
            "Clean job sites and on-time completion",
        ],
        "faqs": [
            {"question": "Composite or wood decking?", "answer": "Composite costs more upfront but needs almost no maintenance; wood offers a natural look at a lower price.", "category": "materials"},
        ],
        "call_to_actions": [
            {"type": "estimate", "text": "Get Your Free Deck Estimate", "description": "Share your ideas and receive a design and quote."},
        ],
        "related_slugs": [
            "fence-installation", "concrete-work", "landscaping",
            "outdoor-lighting", "pergola-construction", "patio-installation",
        ],
        "service_features": [],
        "price_range": "$15,000 - $40,000",
        "timeline": "1-2 weeks",
        "warranty": "2-5 years workmanship, manufacturer warranties on materials",
        "materials": ["Composite Decking", "Cedar", "Pressure-Treated Lumber", "Stainless Steel Hardware", "Quality Railings"],
        "certifications": ["State Licensed Contractor", "Building Code Certified", "Manufacturer Trained"],
    },
    {
        "slug": "siding-installation",
        "title": "Siding Installation & Replacement",
        "meta_description": (
            "Professional siding installation and replacement services in Utah. Vinyl, fiber cement, "
            "wood, and metal siding options with expert installation."
        ),
        "keywords": [
            "siding installation", "siding replacement", "fiber cement siding", "vinyl siding",
            "siding contractor",
        ],
        "long_description": (
            "New siding protects your home from Utah's sun, wind, and snow while transforming its "
            "curb appeal. We install vinyl, fiber cement, wood, and metal siding systems.\n\n"
            "Proper weather barriers, flashing, and trim details are what make siding last, and our "
            "crews follow manufacturer installation guidelines on every wall."
        ),
        "short_description": (
            "Professional siding installation and replacement services using quality materials and "
            "expert techniques for lasting protection and beauty."
        ),
        "benefits": [
            "Boost curb appeal and resale value",
            "Improve insulation and energy efficiency",
            "Protect against moisture and pests",
        ],
        "process": [
            {"step": 1, "title": "Inspection & Selection", "description": "We inspect existing siding and help you choose material and color.", "duration": "1-2 days"},
            {"step": 2, "title": "Removal & Weather Barrier", "description": "Old siding is removed and a new weather barrier installed.", "duration": "1-3 days"},
            {"step": 3, "title": "Installation & Trim", "description": "New siding, trim, and flashing are installed and sealed.", "duration": "3-7 days"},
        ],
        "problems_solved": [
            "Cracked, warped, or faded siding",
            "Drafts and high heating bills",
            "Moisture intrusion behind old siding",
        ],
        "why_choose_us": [
            "Manufacturer-certified siding installers",
            "Attention to flashing and trim details",
            "Warranty-backed workmanship",
        ],
        "faqs": [
            {"question": "Which siding lasts the longest?", "answer": "Fiber cement and metal siding offer the longest service life with minimal upkeep.", "category": "materials"},
        ],
        "call_to_actions": [
            {"type": "estimate", "text": "Get Your Free Siding Estimate", "description": "Receive a detailed quote for new siding."},
        ],
        "related_slugs": [
            "roofing-residential", "window-replacement", "exterior-painting",
            "insulation-services", "gutter-installation", "trim-work",
        ],
        "service_features": [],
        "price_range": "$12,000 - $30,000",
        "timeline": "5-10 days",
        "warranty": "5-10 years workmanship, manufacturer material warranties",
        "materials": ["Fiber Cement", "Vinyl", "Wood", "Metal", "Composite Options"],
        "certifications": ["Manufacturer Certified", "State Licensed Contractor", "Industry Training Certified"],
    },
    {
        "slug": "window-replacement",
        "title": "Window Replacement Services",
        "meta_description": (
            "Professional window replacement and installation services. Energy-efficient windows "
            "with expert installation for improved comfort and savings."
        ),
        "keywords": [
            "window replacement", "window installation", "energy efficient windows",
            "vinyl windows", "window contractor",
        ],
        "long_description": (
            "Old, drafty windows let heat escape in winter and pour it in during summer. Replacement "
            "windows built for Utah's climate cut energy bills and make every room more comfortable.\n\n"
            "We install vinyl, fiberglass, wood, and composite windows with careful flashing and "
            "insulation so they perform as rated for decades."
        ),
        "short_description": (
            "Professional window replacement and installation services with energy-efficient options "
            "for improved comfort and energy savings."
        ),
        "benefits": [
            "Lower heating and cooling costs",
            "Reduce outside noise",
            "Improve security and curb appeal",
        ],
        "process": [
            {"step": 1, "title": "Measurement & Selection", "description": "Precise measurements and help choosing frames and glass.", "duration": "1-2 hours"},
            {"step": 2, "title": "Manufacturing", "description": "Windows are custom built to your measurements.", "duration": "4-8 weeks"},
            {"step": 3, "title": "Installation", "description": "Old units are removed and new windows installed, flashed, and sealed.", "duration": "1-3 days"},
        ],
        "problems_solved": [
            "Drafts and condensation between panes",
            "Windows that stick or will not lock",
            "Fading furniture from UV exposure",
        ],
        "why_choose_us": [
            "Manufacturer-certified installation",
            "Energy Star partner products",
            "Clean, efficient installation crews",
        ],
        "faqs": [
            {"question": "How long do replacement windows last?", "answer": "Quality vinyl and fiberglass windows typically last 20-40 years.", "category": "materials"},
        ],
        "call_to_actions": [
            {"type": "estimate", "text": "Get Your Free Window Estimate", "description": "Schedule an in-home measurement and quote."},
        ],
        "related_slugs": [
            "siding-installation", "roofing-residential", "insulation-services",
            "exterior-painting", "trim-work", "storm-door-installation",
        ],
        "service_features": [],
        "price_range": "$300 - $800 per window",
        "timeline": "1-3 days installation",
        "warranty": "10-20 years materials, 5 years installation",
        "materials": ["Vinyl", "Fiberglass", "Wood", "Composite", "Energy Star Certified"],
        "certifications": ["Manufacturer Certified Installation", "Energy Star Partner", "State Licensed"],
    },
    {
        "slug": "flooring-installation",
        "title": "Flooring Installation Services",
        "meta_description": (
            "Professional flooring installation in Utah including hardwood, laminate, vinyl, tile, "
            "and carpet. Expert installation with quality materials and warranties."
        ),
        "keywords": [
            "flooring installation", "hardwood installation", "laminate installation",
            "vinyl plank installation", "tile installation", "carpet installation", "flooring contractor",
        ],
        "long_description": (
            "New floors change the look and feel of an entire home. We install hardwood, laminate, "
            "luxury vinyl plank, tile, and carpet for homeowners throughout Utah.\n\n"
            "Great floors start below the surface. We level and repair subfloors, manage moisture, "
            "and acclimate materials before installation so your floors stay flat, quiet, and "
            "beautiful for years.\n\n"
            "From a single room to a whole house, our certified installers move furniture, remove "
            "old flooring, and leave your home clean when the job is done."
        ),
        "short_description": (
            "Expert flooring installation services for all flooring types including hardwood, "
            "laminate, vinyl, tile, and carpet with professional craftsmanship."
        ),
        "benefits": [
            "Certified installers for every flooring type",
            "Subfloor preparation that prevents squeaks and gaps",
            "Moisture-resistant options for kitchens, baths, and basements",
            "Furniture moving and old floor removal included",
            "Manufacturer warranties protected by proper installation",
            "Free in-home measurement and estimate",
        ],
        "process": [
            {"step": 1, "title": "Measurement & Selection", "description": "We measure your space and help you compare materials and budgets.", "duration": "1 hour"},
            {"step": 2, "title": "Subfloor Preparation", "description": "Old flooring is removed and the subfloor leveled and repaired.", "duration": "1 day"},
            {"step": 3, "title": "Installation", "description": "Flooring is installed to manufacturer specifications with clean transitions.", "duration": "1-4 days"},
            {"step": 4, "title": "Trim & Cleanup", "description": "Baseboards and transitions are finished and the site cleaned.", "duration": "Half day"},
        ],
        "problems_solved": [
            "Worn, scratched, or outdated floors",
            "Squeaky or uneven subfloors",
            "Water-damaged flooring in kitchens and basements",
        ],
        "why_choose_us": [
            "Certified flooring installers with manufacturer training",
            "Honest recommendations for your lifestyle and budget",
            "Clean, on-time installations",
        ],
        "faqs": [
            {"question": "How long does flooring installation take?", "answer": "Most rooms take 1-2 days; whole-home projects usually take under a week.", "category": "timeline"},
            {"question": "Is luxury vinyl plank waterproof?", "answer": "Most luxury vinyl plank products are fully waterproof, making them ideal for kitchens, baths, and basements.", "category": "materials"},
            {"question": "Do you remove the old flooring?", "answer": "Yes, removal and disposal of old flooring is included in our estimates.", "category": "logistics"},
        ],
        "call_to_actions": [
            {"type": "estimate", "text": "Get Your Free Flooring Estimate", "description": "Schedule a free in-home measurement and quote."},
            {"type": "phone", "text": "Talk to a Flooring Expert", "description": "Call now for help choosing the right floor."},
        ],
        "related_slugs": [
            "subfloor-repair", "interior-painting", "trim-installation",
            "bathroom-remodeling", "kitchen-remodeling", "basement-finishing",
        ],
        "service_features": [
            {"icon": "ruler", "title": "Precision Installation", "description": "Level subfloors and tight seams for a flawless finish."},
            {"icon": "star", "title": "Quality Materials", "description": "Trusted brands in hardwood, vinyl, laminate, and tile."},
        ],
        "price_range": "$3 - $15 per square foot installed",
        "timeline": "1-5 days per room",
        "warranty": "1-5 years installation, manufacturer warranties on materials",
        "materials": ["Hardwood", "Luxury Vinyl", "Laminate", "Tile", "Carpet", "Natural Stone"],
        "certifications": ["Certified Flooring Installers", "Manufacturer Training", "State Licensed"],
    },
    {
        "slug": "plumbing-services",
        "title": "Plumbing Services",
        "meta_description": (
            "Professional plumbing services including repairs, installations, and maintenance. "
            "Licensed plumbers for all residential plumbing needs."
        ),
        "keywords": [
            "plumbing services", "plumber", "pipe repair", "water heater installation",
            "drain cleaning", "fixture installation",
        ],
        "long_description": (
            "Plumbing problems never wait for a convenient time. Our licensed plumbers handle leaks, "
            "clogs, water heaters, and fixture installations across Utah.\n\n"
            "We diagnose the real cause, explain your options, and quote the work upfront before "
            "we start."
        ),
        "short_description": (
            "Licensed professional plumbing services including repairs, installations, maintenance, "
            "and emergency services for all residential needs."
        ),
        "benefits": [
            "Licensed, insured plumbers",
            "Upfront pricing before work begins",
            "Same-day service for most repairs",
        ],
        "process": [
            {"step": 1, "title": "Diagnosis", "description": "We locate the problem and explain the options.", "duration": "30-60 minutes"},
            {"step": 2, "title": "Repair or Installation", "description": "Work is completed with professional-grade parts.", "duration": "Varies"},
        ],
        "problems_solved": [
            "Leaking pipes and fixtures",
            "Slow or clogged drains",
            "No hot water",
        ],
        "why_choose_us": [
            "State licensed plumbers",
            "Clean, respectful technicians",
            "Workmanship warranty on every job",
        ],
        "faqs": [
            {"question": "Do you offer emergency plumbing service?", "answer": "Yes, we respond quickly to burst pipes, major leaks, and sewer backups.", "category": "emergency"},
        ],
        "call_to_actions": [
            {"type": "phone", "text": "Call a Plumber Now", "description": "Leak or clog? Call for fast service.", "urgency": "Same-day service"},
        ],
        "related_slugs": [
            "bathroom-remodeling", "kitchen-remodeling", "water-heater-installation",
            "drain-cleaning", "pipe-repair", "fixture-installation",
        ],
        "service_features": [],
        "price_range": "$100 - $500 typical repairs",
        "timeline": "Same day for most repairs",
        "warranty": "1-2 years workmanship, manufacturer warranties on fixtures",
        "materials": ["Quality Fixtures", "PEX Piping", "Copper Fittings", "Professional-Grade Parts"],
        "certifications": ["State Licensed Plumber", "Insured and Bonded", "Continuing Education Certified"],
    },
    {
        "slug": "electrical-services",
        "title": "Electrical Services",
        "meta_description": (
            "Professional electrical services including repairs, installations, panel upgrades, "
            "and safety inspections by licensed electricians."
        ),
        "keywords": [
            "electrical services", "electrician", "panel upgrade", "lighting installation",
            "outlet installation", "electrical repair",
        ],
        "long_description": (
            "Safe, reliable electrical systems are essential to every home. Our licensed "
            "electricians handle repairs, panel upgrades, lighting, and new circuits throughout Utah.\n\n"
            "All work is performed to the National Electrical Code and local amendments, with "
            "permits and inspections handled for you."
        ),
        "short_description": (
            "Licensed professional electrical services including repairs, installations, panel "
            "upgrades, and safety inspections for all residential needs."
        ),
        "benefits": [
            "Licensed master electricians",
            "Code-compliant, inspected work",
            "Safety inspections for older homes",
        ],
        "process": [
            {"step": 1, "title": "Assessment", "description": "We evaluate your system and recommend a solution.", "duration": "30-60 minutes"},
            {"step": 2, "title": "Electrical Work", "description": "Repairs or installations completed safely and to code.", "duration": "Varies"},
            {"step": 3, "title": "Testing", "description": "Circuits are tested and verified before we leave.", "duration": "30 minutes"},
        ],
        "problems_solved": [
            "Tripping breakers and overloaded circuits",
            "Outdated or unsafe panels",
            "Poor lighting",
        ],
        "why_choose_us": [
            "State licensed master electrician",
            "Permits and inspections handled",
            "Upfront pricing",
        ],
        "faqs": [
            {"question": "When should I upgrade my electrical panel?", "answer": "Frequent breaker trips, a panel over 25 years old, or plans for major appliances or an EV charger are common reasons.", "category": "upgrades"},
        ],
        "call_to_actions": [
            {"type": "phone", "text": "Call a Licensed Electrician", "description": "Get help with repairs and upgrades today."},
        ],
        "related_slugs": [
            "panel-upgrades", "lighting-installation", "ceiling-fan-installation",
            "outlet-installation", "smart-home-installation", "generator-installation",
        ],
        "service_features": [],
        "price_range": "$100 - $500 typical services",
        "timeline": "Same day for most repairs",
        "warranty": "2 years workmanship, manufacturer warranties on components",
        "materials": ["Quality Electrical Components", "Code-Compliant Materials", "Professional-Grade Tools"],
        "certifications": ["State Licensed Master Electrician", "Insured and Bonded", "Continuing Education Certified"],
    },
    {
        "slug": "hvac-services",
        "title": "HVAC Services",
        "meta_description": (
            "Professional HVAC services including installation, repair, and maintenance of heating "
            "and cooling systems by licensed technicians."
        ),
        "keywords": [
            "hvac services", "furnace repair", "air conditioning installation",
            "heat pump installation", "hvac maintenance",
        ],
        "long_description": (
            "Utah's cold winters and hot summers put heating and cooling systems to work year-round. "
            "We install, repair, and maintain furnaces, air conditioners, and heat pumps.\n\n"
            "Proper sizing, installation, and maintenance maximize efficiency and system life, and "
            "our technicians stay current with the latest equipment and refrigerants."
        ),
        "short_description": (
            "Professional HVAC services including heating and cooling system installation, repair, "
            "maintenance, and indoor air quality solutions."
        ),
        "benefits": [
            "Licensed HVAC technicians with extensive local experience",
            "Energy-efficient solutions to reduce utility costs",
            "Preventive maintenance programs to prevent costly breakdowns",
        ],
        "process": [
            {"step": 1, "title": "System Assessment", "description": "We evaluate your system and diagnose issues.", "duration": "30-90 minutes"},
            {"step": 2, "title": "Service or Installation", "description": "Expert HVAC work with quality components.", "duration": "Varies by project"},
            {"step": 3, "title": "Testing & Optimization", "description": "Performance verification and tuning.", "duration": "30-60 minutes"},
        ],
        "problems_solved": [
            "Inadequate heating or cooling",
            "High energy bills from inefficient systems",
            "Uneven temperatures between rooms",
        ],
        "why_choose_us": [
            "Licensed HVAC technicians with local climate expertise",
            "Quality equipment from trusted manufacturers",
            "Emergency HVAC service for urgent comfort issues",
        ],
        "faqs": [
            {"question": "How often should my HVAC system be serviced?", "answer": "Annually: spring for cooling and fall for heating.", "category": "maintenance"},
        ],
        "call_to_actions": [
            {"type": "phone", "text": "Call for HVAC Emergency", "description": "System failure? Call now for heating and cooling help.", "urgency": "Available 24/7"},
        ],
        "related_slugs": [
            "ductwork-installation", "thermostat-installation", "air-quality-improvement",
            "furnace-installation", "ac-installation", "heat-pump-installation",
        ],
        "service_features": [],
        "price_range": "$150 - $800 typical services",
        "timeline": "Same day for most repairs",
        "warranty": "2-5 years workmanship, manufacturer warranties on equipment",
        "materials": ["Quality HVAC Equipment", "High-Efficiency Systems", "Professional-Grade Components"],
        "certifications": ["State Licensed HVAC", "EPA Certified", "Manufacturer Certified"],
    },
    {
        "slug": "interior-demolition",
        "title": "Interior Demolition Services",
        "meta_description": (
            "Safe, efficient interior demolition services in Utah for remodels and renovations. "
            "Selective demo, wall removal, and complete debris haul-away."
        ),
        "keywords": [
            "interior demolition", "selective demolition", "wall removal", "kitchen demolition",
            "bathroom demolition", "demolition contractor",
        ],
        "long_description": (
            "Every successful remodel starts with a clean, controlled demolition. We remove walls, "
            "cabinets, flooring, drywall, and fixtures across Utah while protecting everything that "
            "stays.\n\n"
            "Our crews use dust containment, floor protection, and careful disconnection of "
            "utilities, then haul away every bit of debris so your project is ready to build."
        ),
        "short_description": (
            "Selective and full interior demolition with dust control and complete debris removal."
        ),
        "benefits": [
            "Dust containment that protects the rest of your home",
            "Careful removal around structure and utilities",
            "Debris haul-away and recycling included",
            "Fast turnaround to keep your remodel on schedule",
        ],
        "process": [
            {"step": 1, "title": "Walkthrough & Scope", "description": "We confirm what stays, what goes, and where utilities run.", "duration": "1 hour"},
            {"step": 2, "title": "Protection & Containment", "description": "Floors, doorways, and HVAC returns are sealed off.", "duration": "Half day"},
            {"step": 3, "title": "Demolition & Haul-Away", "description": "Selective removal followed by complete debris cleanup.", "duration": "1-3 days"},
        ],
        "problems_solved": [
            "Messy DIY demo that damages what should stay",
            "Dust spreading through the home",
            "No way to dispose of heavy debris",
        ],
        "why_choose_us": [
            "Experienced, insured demolition crews",
            "Responsible recycling and disposal",
            "Clean site ready for your contractor",
        ],
        "faqs": [
            {"question": "Can you remove a load-bearing wall?", "answer": "Yes, with an engineered beam plan and permit; we coordinate both.", "category": "structure"},
            {"question": "Is debris removal included?", "answer": "Yes, all debris is hauled away and recyclable materials are diverted from the landfill.", "category": "logistics"},
        ],
        "call_to_actions": [
            {"type": "estimate", "text": "Get Your Free Demolition Estimate", "description": "Tell us about your project for a fast quote."},
        ],
        "related_slugs": ["construction-debris-removal", "kitchen-remodeling", "bathroom-remodeling"],
        "service_features": [],
        "price_range": "$1,000 - $8,000",
        "timeline": "1-3 days",
        "warranty": "Damage-free guarantee on protected areas",
        "materials": ["Dust Barriers", "Floor Protection", "Roll-Off Containers"],
        "certifications": ["State Licensed Contractor", "Lead-Safe Certified", "Fully Insured"],
    },
    {
        "slug": "junk-removal",
        "title": "Junk Removal Services",
        "meta_description": (
            "Fast, affordable junk removal in Utah. Furniture, appliances, yard waste, and "
            "whole-home cleanouts hauled away the same day."
        ),
        "keywords": [
            "junk removal", "junk hauling", "furniture removal", "appliance removal",
            "garage cleanout", "estate cleanout",
        ],
        "long_description": (
            "Clutter takes over garages, basements, and yards faster than anyone expects. We haul "
            "away furniture, appliances, yard waste, and everything in between for homes and "
            "businesses across Utah.\n\n"
            "Our crews do all the lifting and loading. We donate and recycle whatever we can and "
            "price by volume, so you only pay for the space your items take in the truck."
        ),
        "short_description": (
            "Same-day junk removal and cleanouts with donation and recycling of usable items."
        ),
        "benefits": [
            "Same-day and next-day appointments",
            "Upfront volume-based pricing",
            "We do all the lifting and loading",
            "Donation and recycling of usable items",
        ],
        "process": [
            {"step": 1, "title": "Book & Quote", "description": "Schedule online or by phone and get an onsite quote.", "duration": "15 minutes"},
            {"step": 2, "title": "Load & Haul", "description": "Our crew loads everything and sweeps up.", "duration": "1-3 hours"},
        ],
        "problems_solved": [
            "Garages and basements too full to use",
            "Old appliances and furniture with nowhere to go",
            "Estate and move-out cleanouts on a deadline",
        ],
        "why_choose_us": [
            "Local, insured crews",
            "Eco-friendly disposal",
            "Transparent pricing with no hidden fees",
        ],
        "faqs": [
            {"question": "What items can't you take?", "answer": "Hazardous materials such as paint, chemicals, and asbestos require special handling; ask us about alternatives.", "category": "items"},
            {"question": "How is junk removal priced?", "answer": "By the volume your items take up in our truck, quoted before we start.", "category": "pricing"},
        ],
        "call_to_actions": [
            {"type": "phone", "text": "Book Same-Day Junk Removal", "description": "Call now to schedule a pickup.", "urgency": "Same-day availability"},
        ],
        "related_slugs": ["construction-debris-removal", "interior-demolition"],
        "service_features": [],
        "price_range": "$150 - $650 per load",
        "timeline": "Same or next day",
        "warranty": "Satisfaction guaranteed",
        "materials": [],
        "certifications": ["Licensed and Insured", "Local Business License"],
    },
    {
        "slug": "construction-debris-removal",
        "title": "Construction Debris Removal",
        "meta_description": (
            "Construction debris removal and jobsite cleanup in Utah for contractors and "
            "homeowners. Drywall, lumber, roofing, and concrete hauled away."
        ),
        "keywords": [
            "construction debris removal", "construction cleanup", "debris hauling",
            "jobsite cleanup", "renovation debris removal",
        ],
        "long_description": (
            "Renovation leaves behind drywall scraps, lumber, roofing, tile, and concrete. We clear "
            "jobsites across Utah quickly so work can continue safely.\n\n"
            "We serve contractors with scheduled pickups and homeowners finishing DIY projects, "
            "sorting materials for recycling wherever possible."
        ),
        "short_description": (
            "Fast construction debris hauling and jobsite cleanup for contractors and homeowners."
        ),
        "benefits": [
            "Keep jobsites safe and code-compliant",
            "Scheduled pickups for ongoing projects",
            "Recycling of wood, metal, and concrete",
        ],
        "process": [
            {"step": 1, "title": "Site Review", "description": "We assess volume and material types.", "duration": "15 minutes"},
            {"step": 2, "title": "Removal & Sweep", "description": "Debris is loaded, hauled, and the site swept clean.", "duration": "1-4 hours"},
        ],
        "problems_solved": [
            "Debris piles that create safety hazards",
            "Dumpsters that cannot fit on the property",
            "Final cleanup before inspections",
        ],
        "why_choose_us": [
            "Contractor-friendly scheduling",
            "Heavy material handling",
            "Responsible disposal",
        ],
        "faqs": [
            {"question": "Do you take concrete and brick?", "answer": "Yes, heavy materials are priced by weight and recycled when possible.", "category": "items"},
        ],
        "call_to_actions": [
            {"type": "form", "text": "Schedule a Debris Pickup", "description": "Request a pickup for your jobsite."},
        ],
        "related_slugs": ["junk-removal", "interior-demolition"],
        "service_features": [],
        "price_range": "$200 - $900 per load",
        "timeline": "Same or next day",
        "warranty": "Broom-clean site guarantee",
        "materials": [],
        "certifications": ["Licensed and Insured", "Local Business License"],
    },
)
