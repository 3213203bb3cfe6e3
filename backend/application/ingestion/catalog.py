"""
Static corpora and topic lists used by the dataset batchers.

Dependencies: None
System role: Curated educational content
"""

# (title, content, subject, difficulty)
BASIC_SAMPLES: list[tuple[str, str, str, str]] = [
    ("Machine Learning", "Machine learning is a subset of artificial intelligence that focuses on algorithms learning from data.", "Computer Science", "Intermediate"),
    ("Photosynthesis", "Photosynthesis is the process by which plants convert light energy into chemical energy using carbon dioxide and water.", "Biology", "Beginner"),
    ("Chemical Bonds", "Chemical bonds form when atoms share or transfer electrons to achieve stable electron configurations.", "Chemistry", "Intermediate"),
    ("Newton's Laws", "Newton's three laws of motion describe the relationship between forces acting on objects and their motion.", "Physics", "Intermediate"),
]

BUILTIN_CONTENT: list[tuple[str, str, str, str]] = [
    # Biology
    ("Cell Structure", "Cells are the basic units of life, containing organelles like nucleus (controls cell activities), mitochondria (produces energy), and ribosomes (synthesize proteins).", "Biology", "Beginner"),
    ("DNA and Genetics", "DNA contains genetic instructions for all living organisms. Genes are segments of DNA that code for specific traits through protein synthesis.", "Biology", "Intermediate"),
    ("Evolution", "Evolution is the process by which species change over time through natural selection, genetic drift, and other mechanisms.", "Biology", "Advanced"),
    ("Ecosystems", "Ecosystems are communities of living organisms interacting with their physical environment through energy flow and nutrient cycling.", "Biology", "Intermediate"),
    # Chemistry
    ("Periodic Table", "The periodic table organizes elements by atomic number, revealing patterns in properties like electron configuration and chemical reactivity.", "Chemistry", "Beginner"),
    ("Organic Chemistry", "Organic chemistry studies carbon-containing compounds, which form the basis of all living organisms and many synthetic materials.", "Chemistry", "Advanced"),
    ("Acids and Bases", "Acids are proton donors while bases are proton acceptors. Their interactions determine pH and are crucial in biological systems.", "Chemistry", "Intermediate"),
    # Physics
    ("Electromagnetic Waves", "Electromagnetic waves are energy patterns that travel through space, including visible light, radio waves, and X-rays.", "Physics", "Advanced"),
    ("Thermodynamics", "Thermodynamics studies heat, work, and energy transfer, governing everything from engines to biological processes.", "Physics", "Advanced"),
    ("Simple Harmonic Motion", "Simple harmonic motion describes repetitive oscillations like pendulums and springs, fundamental to understanding waves.", "Physics", "Intermediate"),
    # Mathematics
    ("Calculus", "Calculus studies rates of change (derivatives) and accumulation (integrals), essential for physics and engineering applications.", "Mathematics", "Advanced"),
    ("Statistics", "Statistics involves collecting, analyzing, and interpreting numerical data to make informed decisions and predictions.", "Mathematics", "Intermediate"),
    ("Geometry", "Geometry studies shapes, sizes, and spatial relationships, forming the foundation for architecture and computer graphics.", "Mathematics", "Beginner"),
    ("Linear Algebra", "Linear algebra deals with vectors and matrices, crucial for computer graphics, machine learning, and engineering.", "Mathematics", "Advanced"),
    # History
    ("World War II", "World War II (1939-1945) was a global conflict that reshaped international relations and accelerated technological development.", "History", "Intermediate"),
    ("Renaissance", "The Renaissance (14th-17th centuries) marked a cultural rebirth in Europe, emphasizing art, science, and humanist philosophy.", "History", "Intermediate"),
    ("Industrial Revolution", "The Industrial Revolution transformed society through mechanization, urbanization, and mass production from 1760-1840.", "History", "Intermediate"),
    # Computer Science
    ("Algorithms", "Algorithms are step-by-step procedures for solving problems, fundamental to computer programming and efficiency.", "Computer Science", "Intermediate"),
    ("Data Structures", "Data structures organize and store data efficiently, including arrays, trees, and hash tables for optimal performance.", "Computer Science", "Intermediate"),
    ("Databases", "Databases store and manage structured information, using SQL queries and normalization for data integrity.", "Computer Science", "Advanced"),
    ("Artificial Intelligence", "AI creates systems that can perform tasks typically requiring human intelligence, including learning and decision-making.", "Computer Science", "Advanced"),
    # Literature
    ("Shakespeare", "William Shakespeare revolutionized English literature with complex characters and timeless themes in plays like Hamlet and Romeo and Juliet.", "Literature", "Intermediate"),
    ("Poetry Analysis", "Poetry uses literary devices like metaphor, rhythm, and imagery to convey emotions and ideas in concentrated artistic language.", "Literature", "Beginner"),
    # Geography
    ("Climate Change", "Climate change refers to long-term shifts in global weather patterns, primarily caused by human activities increasing greenhouse gases.", "Geography", "Intermediate"),
    ("Plate Tectonics", "Plate tectonics explains Earth's surface movements through the interaction of lithospheric plates, causing earthquakes and mountain formation.", "Geography", "Advanced"),
    # Economics
    ("Supply and Demand", "Supply and demand are fundamental economic forces that determine prices and resource allocation in market economies.", "Economics", "Beginner"),
    ("Inflation", "Inflation is the general increase in prices over time, affecting purchasing power and economic stability.", "Economics", "Intermediate"),
]

# (topic, subject, difficulty) fetched from the encyclopedia summary endpoint
ENCYCLOPEDIA_TOPICS: list[tuple[str, str, str]] = [
    ("Photosynthesis", "Biology", "Beginner"),
    ("Cell membrane", "Biology", "Intermediate"),
    ("DNA replication", "Biology", "Advanced"),
    ("Mitosis", "Biology", "Intermediate"),
    ("Ecosystem", "Biology", "Beginner"),
    ("Evolution", "Biology", "Advanced"),
    ("Protein synthesis", "Biology", "Advanced"),
    ("Respiration", "Biology", "Intermediate"),
    ("Chemical bond", "Chemistry", "Intermediate"),
    ("Periodic table", "Chemistry", "Beginner"),
    ("Organic chemistry", "Chemistry", "Advanced"),
    ("Acid-base reaction", "Chemistry", "Intermediate"),
    ("Oxidation", "Chemistry", "Intermediate"),
    ("Molecular orbital", "Chemistry", "Advanced"),
    ("Newton's laws of motion", "Physics", "Intermediate"),
    ("Electromagnetic radiation", "Physics", "Advanced"),
    ("Thermodynamics", "Physics", "Advanced"),
    ("Simple harmonic motion", "Physics", "Intermediate"),
    ("Quantum mechanics", "Physics", "Advanced"),
    ("Relativity", "Physics", "Advanced"),
    ("Wave-particle duality", "Physics", "Advanced"),
    ("Calculus", "Mathematics", "Advanced"),
    ("Linear algebra", "Mathematics", "Advanced"),
    ("Statistics", "Mathematics", "Intermediate"),
    ("Geometry", "Mathematics", "Beginner"),
    ("Trigonometry", "Mathematics", "Intermediate"),
    ("Differential equations", "Mathematics", "Advanced"),
    ("World War II", "History", "Intermediate"),
    ("Renaissance", "History", "Intermediate"),
    ("Industrial Revolution", "History", "Intermediate"),
    ("Cold War", "History", "Intermediate"),
    ("Ancient Rome", "History", "Beginner"),
    ("French Revolution", "History", "Intermediate"),
    ("Algorithm", "Computer Science", "Intermediate"),
    ("Data structure", "Computer Science", "Intermediate"),
    ("Machine learning", "Computer Science", "Advanced"),
    ("Database", "Computer Science", "Intermediate"),
    ("Operating system", "Computer Science", "Advanced"),
    ("Climate change", "Geography", "Intermediate"),
    ("Plate tectonics", "Geography", "Advanced"),
    ("Ecosystem", "Geography", "Intermediate"),
    ("Urbanization", "Geography", "Intermediate"),
    ("Supply and demand", "Economics", "Beginner"),
    ("Inflation", "Economics", "Intermediate"),
    ("Gross domestic product", "Economics", "Intermediate"),
    ("Market economy", "Economics", "Beginner"),
]

# subject -> topics explained by the generative model
GENERATION_TOPICS: dict[str, list[str]] = {
    "Biology": ["Photosynthesis", "Cell Division", "Genetics", "Evolution", "Ecology", "Anatomy", "Biochemistry"],
    "Chemistry": ["Atomic Structure", "Chemical Bonding", "Stoichiometry", "Thermochemistry", "Organic Reactions", "Electrochemistry"],
    "Physics": ["Mechanics", "Electromagnetism", "Thermodynamics", "Quantum Physics", "Optics", "Nuclear Physics"],
    "Mathematics": ["Calculus", "Linear Algebra", "Statistics", "Differential Equations", "Number Theory", "Graph Theory"],
    "History": ["Ancient Civilizations", "Medieval Period", "Renaissance", "Industrial Revolution", "World Wars", "Modern Era"],
    "Computer Science": ["Algorithms", "Data Structures", "Machine Learning", "Databases", "Networks", "Security"],
    "Geography": ["Climate Systems", "Geological Processes", "Human Geography", "Cartography", "Environmental Science"],
    "Economics": ["Microeconomics", "Macroeconomics", "International Trade", "Economic Policy", "Market Structures"],
}

BEGINNER_TOPICS: tuple[str, ...] = (
    "Photosynthesis", "Atomic Structure", "Algebra", "Ancient Civilizations", "Supply and Demand",
)
ADVANCED_TOPICS: tuple[str, ...] = (
    "Quantum Physics", "Differential Equations", "Machine Learning", "Biochemistry", "Electrochemistry",
)


def difficulty_for_topic(topic: str) -> str:
    """
    Difficulty of a generated topic from the fixed keyword lists.

    Matching is a case-insensitive substring test, so "Linear Algebra" is
    Beginner because it contains "Algebra".
    """
    lowered = topic.lower()
    if any(keyword.lower() in lowered for keyword in BEGINNER_TOPICS):
        return "Beginner"
    if any(keyword.lower() in lowered for keyword in ADVANCED_TOPICS):
        return "Advanced"
    return "Intermediate"
