"""Demo categories and articles used to seed a fresh site."""

_IMG = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&w={}&h={}&fit=crop"


def _avatar(photo: str) -> str:
    return _IMG.format(photo, 100, 100)


def _cover(photo: str) -> str:
    return _IMG.format(photo, 600, 300)


DEMO_CATEGORIES = [
    {"name": "Technology", "slug": "technology", "description": "Latest tech news and innovations", "color": "bg-blue-100 text-blue-700"},
    {"name": "Business", "slug": "business", "description": "Business and finance news", "color": "bg-green-100 text-green-700"},
    {"name": "Health", "slug": "health", "description": "Health and medical news", "color": "bg-purple-100 text-purple-700"},
    {"name": "Sports", "slug": "sports", "description": "Sports news and updates", "color": "bg-orange-100 text-orange-700"},
    {"name": "Politics", "slug": "politics", "description": "Political news and analysis", "color": "bg-red-100 text-red-700"},
    {"name": "Science", "slug": "science", "description": "Scientific discoveries and research", "color": "bg-indigo-100 text-indigo-700"},
    {"name": "Entertainment", "slug": "entertainment", "description": "Entertainment and celebrity news", "color": "bg-pink-100 text-pink-700"},
]

# Listed newest first.
DEMO_ARTICLES = [
    {
        "title": "Revolutionary AI Technology Transforms Urban Planning and City Development",
        "content": (
            "Cities worldwide are adopting artificial intelligence systems to optimize traffic flow "
            "and reduce energy consumption for millions of residents.\n\n"
            "The systems combine data from traffic sensors, weather stations, and citizen feedback. "
            "Early deployments report congestion down by up to 30% and energy use down by 25%.\n\n"
            "Planners can now simulate infrastructure changes before committing budgets, and the "
            "approach is spreading across North America, Europe, and Asia."
        ),
        "excerpt": "Cities worldwide are adopting AI systems to optimize traffic flow and cut energy consumption.",
        "author": "Sarah Chen",
        "author_title": "Technology Reporter",
        "author_image": _avatar("photo-1507003211169-0a1dd7228f2d"),
        "category": "Technology",
        "tags": ["AI", "Urban Planning", "Smart Cities"],
        "image_url": _IMG.format("photo-1477959858617-67f85cf4f1df", 800, 500),
        "published": True,
        "featured": True,
        "views": 1250,
        "likes": 234,
    },
    {
        "title": "Remote Work Trends Show Significant Impact on Corporate Real Estate Markets",
        "content": (
            "The shift to remote work has changed how companies view office space. Traditional "
            "office leasing fell 40% over the past year.\n\n"
            "Developers are converting office towers into mixed-use buildings that combine work, "
            "housing, and retail, and hybrid work looks set to stay."
        ),
        "excerpt": "Remote work is reshaping how companies use office space and what developers build.",
        "author": "Michael Torres",
        "author_title": "Business Analyst",
        "author_image": _avatar("photo-1472099645785-5658abf4ff4e"),
        "category": "Business",
        "tags": ["Remote Work", "Real Estate", "Corporate Trends"],
        "image_url": _cover("photo-1497215842964-222b430dc094"),
        "published": True,
        "featured": False,
        "views": 890,
        "likes": 156,
    },
    {
        "title": "Global Supply Chain Disruptions Drive Innovation in Logistics Technology",
        "content": (
            "Supply chain shocks have accelerated investment in AI-powered tracking and automated "
            "warehouses.\n\n"
            "Retailers are rolling out real-time tracking to spot bottlenecks early, and spending on "
            "robotics has tripled year over year."
        ),
        "excerpt": "Supply chain challenges drive investment in AI-powered logistics and automated warehouses.",
        "author": "Jennifer Park",
        "author_title": "Supply Chain Reporter",
        "author_image": _avatar("photo-1494790108755-2616b612b77c"),
        "category": "Business",
        "tags": ["Supply Chain", "Logistics", "Automation"],
        "image_url": _cover("photo-1586528116311-ad8dd3c8310d"),
        "published": True,
        "featured": False,
        "views": 654,
        "likes": 89,
    },
    {
        "title": "Cryptocurrency Market Volatility Sparks New Regulatory Framework Discussions",
        "content": (
            "Regulators are drafting frameworks to address cryptocurrency volatility as digital "
            "assets reach institutional portfolios.\n\n"
            "Central banks are studying their own digital currencies, and large financial "
            "institutions are growing their compliance teams in response."
        ),
        "excerpt": "Regulators develop new frameworks as cryptocurrency gains institutional adoption.",
        "author": "Robert Kim",
        "author_title": "Financial Markets Reporter",
        "author_image": _avatar("photo-1507003211169-0a1dd7228f2d"),
        "category": "Business",
        "tags": ["Cryptocurrency", "Financial Regulation", "Markets"],
        "image_url": _cover("photo-1621761191319-c6fb62004040"),
        "published": True,
        "featured": False,
        "views": 1120,
        "likes": 203,
    },
    {
        "title": "Sustainable Energy Investments Reach Record High as Companies Prioritize ESG Goals",
        "content": (
            "Corporate investment in renewable energy has passed $500 billion globally.\n\n"
            "Many firms now commit to net-zero emissions by 2030, and investors increasingly favour "
            "companies with strong ESG credentials."
        ),
        "excerpt": "Record corporate renewable energy investment as ESG priorities reshape strategy.",
        "author": "Lisa Martinez",
        "author_title": "Sustainability Reporter",
        "author_image": _avatar("photo-1438761681033-6461ffad8d80"),
        "category": "Business",
        "tags": ["Sustainable Energy", "ESG", "Corporate Investment"],
        "image_url": _cover("photo-1466611653911-95081537e5b7"),
        "published": True,
        "featured": False,
        "views": 845,
        "likes": 167,
    },
    {
        "title": "E-commerce Growth Drives Major Retail Infrastructure Investments",
        "content": (
            "Online sales now make up over 35% of retail transactions, pushing retailers to invest "
            "in fulfilment centres and last-mile delivery.\n\n"
            "Spending focuses on personalization, inventory systems, and omnichannel checkout."
        ),
        "excerpt": "E-commerce expansion drives billions in retail infrastructure investment.",
        "author": "David Chen",
        "author_title": "Retail Industry Analyst",
        "author_image": _avatar("photo-1472099645785-5658abf4ff4e"),
        "category": "Business",
        "tags": ["E-commerce", "Retail Technology", "Logistics"],
        "image_url": _cover("photo-1556742049-0cfed4f6a45d"),
        "published": True,
        "featured": False,
        "views": 932,
        "likes": 124,
    },
    {
        "title": "Breakthrough Medical Device Approved for Early Cancer Detection",
        "content": (
            "A device that detects cancer cells up to two years earlier than existing methods has "
            "received regulatory approval.\n\n"
            "Trials with more than 10,000 patients showed 95% accuracy from a single blood sample. "
            "Major medical centres expect to offer the test within six months."
        ),
        "excerpt": "A new device detects cancer up to two years before traditional methods.",
        "author": "Dr. Amanda Foster",
        "author_title": "Medical Correspondent",
        "author_image": _avatar("photo-1559839734-2b71ea197ec2"),
        "category": "Health",
        "tags": ["Medical Technology", "Cancer Detection", "Healthcare Innovation"],
        "image_url": _cover("photo-1576091160399-112ba8d25d1f"),
        "published": True,
        "featured": False,
        "views": 2100,
        "likes": 445,
    },
    {
        "title": "Olympic Training Methods Revolutionize Amateur Athletics Programs",
        "content": (
            "Training techniques built for Olympic athletes are being adapted for community sports "
            "programs.\n\n"
            "Pilot programs report 60% fewer sports injuries, and coaches nationwide are being "
            "trained in the new methods."
        ),
        "excerpt": "Professional coaching techniques are improving community sports programs.",
        "author": "Coach Martinez",
        "author_title": "Sports Performance Specialist",
        "author_image": _avatar("photo-1566492031773-4f4e44671d66"),
        "category": "Sports",
        "tags": ["Olympic Training", "Amateur Athletics", "Sports Science"],
        "image_url": _cover("photo-1544717297-fa95b6ee9643"),
        "published": True,
        "featured": False,
        "views": 756,
        "likes": 89,
    },
    {
        "title": "Renewable Energy Storage Breakthrough Promises Grid Stability",
        "content": (
            "A new battery chemistry holds charge for weeks, addressing the intermittency of solar "
            "and wind power.\n\n"
            "It uses abundant materials, and utilities plan the first commercial deployments within "
            "two years."
        ),
        "excerpt": "New battery technology could make solar and wind power far more reliable.",
        "author": "Dr. Lisa Park",
        "author_title": "Energy Research Scientist",
        "author_image": _avatar("photo-1573496359142-b8d87734a5a2"),
        "category": "Science",
        "tags": ["Renewable Energy", "Battery Technology", "Climate Change"],
        "image_url": _cover("photo-1582719508461-905c673771fd"),
        "published": True,
        "featured": False,
        "views": 1340,
        "likes": 267,
    },
]

__all__ = ["DEMO_ARTICLES", "DEMO_CATEGORIES"]
