"""
Category and subcategory catalog with English and Portuguese labels.
"""
from typing import Dict, List, NamedTuple, Optional


class CatalogEntry(NamedTuple):
    id: str
    label_en: str
    label_pt: str
    icon: str = ""

    def label(self, is_pt: bool) -> str:
        return self.label_pt if is_pt else self.label_en


ALL_CATEGORY = CatalogEntry("all", "All", "Todos")

CATEGORIES: List[CatalogEntry] = [
    ALL_CATEGORY,
    CatalogEntry("real-estate", "Real Estate", "Imobiliário", "🏠"),
    CatalogEntry("home-services", "Home Services", "Serviços para Casa", "🛠️"),
    CatalogEntry("hosting", "Property Hosting", "Gestão de Alojamento", "🔑"),
    CatalogEntry("food", "Food & Dining", "Comida & Restauração", "🍽️"),
    CatalogEntry("legal-bureaucracy", "Legal & Bureaucracy", "Legal & Burocracia", "⚖️"),
    CatalogEntry("relocation-expat", "Relocation & Expat Services", "Relocation & Expats", "🧳"),
    CatalogEntry("family-care", "Family & Care", "Família & Cuidados", "👨‍👩‍👧"),
    CatalogEntry("education-courses", "Education & Courses", "Educação & Cursos", "📚"),
    CatalogEntry("wellness-beauty", "Wellness & Beauty", "Bem-estar & Beleza", "💆‍♀️"),
    CatalogEntry("sports-outdoors", "Sports & Outdoors", "Desporto & Ar Livre", "🏃‍♂️"),
    CatalogEntry("medical", "Medical", "Saúde", "🏥"),
    CatalogEntry("transportation", "Transportation", "Transportes", "🚗"),
    CatalogEntry("pets", "Pets", "Animais de Estimação", "🐾"),
    CatalogEntry("events-entertainment", "Events & Entertainment", "Eventos & Entretenimento", "🎉"),
    CatalogEntry("professional", "Professional Services", "Serviços Profissionais", "💼"),
]

SUBCATEGORIES: Dict[str, List[CatalogEntry]] = {
    "real-estate": [
        CatalogEntry("real-estate-agent", "Real Estate Agent", "Agente Imobiliário", "🔑"),
        CatalogEntry("property-management", "Property Management", "Gestão de Propriedades", "🏢"),
        CatalogEntry("architect", "Architect", "Arquiteto", "🏗️"),
        CatalogEntry("contractor", "Contractor", "Empreiteiro", "👷‍♂️"),
        CatalogEntry("notary", "Notary", "Notário", "📜"),
        CatalogEntry("legal-real-estate", "Real Estate Lawyer", "Advogado Imobiliário", "⚖️"),
        CatalogEntry("home-staging", "Home Staging", "Home Staging", "🛋️"),
        CatalogEntry("renovation", "Renovation", "Renovações", "🧱"),
    ],
    "home-services": [
        CatalogEntry("cleaning", "Cleaning", "Limpezas", "🧹"),
        CatalogEntry("handyman", "Handyman", "Faz-tudo", "🔧"),
        CatalogEntry("plumber", "Plumber", "Canalizador", "🚰"),
        CatalogEntry("electrician", "Electrician", "Electricista", "⚡"),
        CatalogEntry("carpenter", "Carpenter", "Carpinteiro", "🔨"),
        CatalogEntry("gardener", "Gardener", "Jardineiro", "🌱"),
        CatalogEntry("pest-control", "Pest Control", "Desinfestação", "🐜"),
        CatalogEntry("roofer", "Roofer", "Coberturas / Telhados", "🏠"),
        CatalogEntry("painter", "Painter", "Pintor", "🎨"),
        CatalogEntry("glazier", "Glazier / Windows", "Vidros / Janelas", "🪟"),
        CatalogEntry("pool-service", "Pool Service", "Manutenção de Piscinas", "🏊"),
        CatalogEntry("appliance-repair", "Appliance Repair", "Reparação de Eletrodomésticos", "🧺"),
        CatalogEntry("solar-photovoltaics", "Solar / Photovoltaics", "Painéis Solares", "☀️"),
        CatalogEntry("security-systems", "Security Systems", "Sistemas de Segurança", "🔒"),
        CatalogEntry("locksmith", "Locksmith", "Serralheiro", "🔐"),
        CatalogEntry("aircon-hvac", "Air Conditioning / HVAC", "Ar Condicionado / AVAC", "❄️"),
        CatalogEntry("moving-company", "Moving & Relocation", "Empresa de Mudanças", "🚚"),
    ],
    "hosting": [
        CatalogEntry("airbnb-management", "Airbnb Management", "Gestão Airbnb", "🏡"),
        CatalogEntry("key-holding", "Key Holding", "Guarda de Chaves", "🔑"),
        CatalogEntry("guest-reception", "Guest Reception", "Receção de Hóspedes", "🤝"),
        CatalogEntry("laundry-rentals", "Laundry for Rentals", "Lavandaria para Alojamento", "🧺"),
        CatalogEntry("home-checks", "Home Check-ins", "Vistorias à Casa", "👀"),
    ],
    "food": [
        CatalogEntry("restaurant", "Restaurant", "Restaurante", "🍽️"),
        CatalogEntry("cafe", "Café", "Café", "☕"),
        CatalogEntry("private-chef", "Private Chef", "Chef Privado", "👨‍🍳"),
        CatalogEntry("catering", "Catering", "Catering", "🥂"),
        CatalogEntry("meal-prep", "Meal Prep / Delivery", "Refeições / Entrega", "🍱"),
        CatalogEntry("bakery", "Bakery", "Padaria", "🥖"),
        CatalogEntry("wine-spirits", "Wine & Spirits", "Vinhos & Bebidas", "🍷"),
    ],
    "legal-bureaucracy": [
        CatalogEntry("lawyer", "Lawyer", "Advogado", "⚖️"),
        CatalogEntry("tax-advisor", "Tax Advisor", "Consultor Fiscal", "📊"),
    ],
    "relocation-expat": [
        CatalogEntry("immigration-residency", "Immigration / Residency", "Imigração / Residência", "🛂"),
        CatalogEntry("nif-bank", "NIF & Bank Setup", "NIF & Conta Bancária", "🏦"),
        CatalogEntry("documentation-help", "Documentation Help", "Apoio com Documentos", "📄"),
        CatalogEntry("relocation-agency", "Relocation Agency", "Agência de Relocation", "📦"),
        CatalogEntry("settling-in-services", "Settling-in Services", "Serviços de Acolhimento", "🧭"),
    ],
    "family-care": [
        CatalogEntry("babysitting", "Babysitting", "Babysitting", "🧸"),
        CatalogEntry("nanny", "Nanny", "Ama / Nanny", "👶"),
        CatalogEntry("elderly-care", "Elderly Care", "Cuidados a Idosos", "🧓"),
        CatalogEntry("kindergarten-daycare", "Kindergarten / Daycare", "Infantário / Creche", "🧒"),
        CatalogEntry("summer-camp", "Summer Camp", "Campo de Férias", "🏕️"),
        CatalogEntry("special-needs", "Special Needs Support", "Apoio Necessidades Especiais", "🧩"),
    ],
    "education-courses": [
        CatalogEntry("language-school", "Language School", "Escola de Línguas", "📘"),
        CatalogEntry("tutoring", "Tutoring", "Explicações", "✏️"),
        CatalogEntry("school-advice", "School Advice", "Apoio na Escolha de Escola", "🏫"),
        CatalogEntry("music-school", "Music School", "Escola de Música", "🎵"),
        CatalogEntry("dance-school", "Dance School", "Escola de Dança", "💃"),
    ],
    "wellness-beauty": [
        CatalogEntry("massage", "Massage", "Massagem", "💆‍♀️"),
        CatalogEntry("yoga", "Yoga", "Yoga", "🧘‍♀️"),
        CatalogEntry("pilates", "Pilates", "Pilates", "🤸‍♀️"),
        CatalogEntry("spa", "Spa", "Spa", "🧖‍♀️"),
        CatalogEntry("hair-salon", "Hair Salon", "Cabeleireiro", "💇‍♀️"),
        CatalogEntry("barber", "Barber", "Barbeiro", "💈"),
        CatalogEntry("dermatology-botox", "Aesthetic Medicine & Botox", "Medicina Estética / Botox", "💉"),
        CatalogEntry("nutritionist", "Nutritionist", "Nutricionista", "🥗"),
        CatalogEntry("physiotherapy", "Physiotherapy", "Fisioterapia", "🦵"),
        CatalogEntry("osteopath", "Osteopath", "Osteopata", "🦴"),
        CatalogEntry("psychologist", "Psychologist", "Psicólogo", "🧠"),
        CatalogEntry("acupuncture", "Acupuncture", "Acupunctura", "🪡"),
        CatalogEntry("personal-training", "Personal Training", "Treino Personalizado", "🏋️"),
    ],
    "sports-outdoors": [
        CatalogEntry("surf-school", "Surf School", "Escola de Surf", "🏄‍♂️"),
        CatalogEntry("padel", "Padel", "Pádel", "🏓"),
        CatalogEntry("gym-fitness", "Gym & Fitness", "Ginásio & Fitness", "💪"),
        CatalogEntry("running-club", "Running Club", "Clube de Corrida", "🏃‍♂️"),
        CatalogEntry("swimming", "Swimming & Aquatics", "Natação & Aquáticos", "🏊‍♂️"),
        CatalogEntry("golf", "Golf", "Golfe", "⛳"),
        CatalogEntry("tennis", "Tennis", "Ténis", "🎾"),
        CatalogEntry("cycling", "Cycling", "Ciclismo", "🚴‍♂️"),
        CatalogEntry("martial-arts", "Martial Arts", "Artes Marciais", "🥋"),
        CatalogEntry("sailing-school", "Sailing School", "Escola de Vela", "⛵"),
        CatalogEntry("boat-tours", "Boat Tours & Charters", "Passeios de Barco", "🛥️"),
        CatalogEntry("horse-riding", "Horse Riding", "Equitação", "🐎"),
    ],
    "medical": [
        CatalogEntry("gp", "General Practitioner", "Clínico Geral", "👨‍⚕️"),
        CatalogEntry("clinic-urgent-care", "Clinic / Urgent Care", "Clínica / Urgências", "🏥"),
        CatalogEntry("laboratory", "Laboratory / Analysis", "Análises Clínicas", "🧪"),
        CatalogEntry("imaging", "Imaging", "Imagiologia", "🩻"),
        CatalogEntry("dentist", "Dentist", "Dentista", "🦷"),
        CatalogEntry("pediatrics", "Pediatrics", "Pediatria", "🍼"),
        CatalogEntry("gynecology", "Gynecology", "Ginecologia", "👩‍⚕️"),
        CatalogEntry("orthopedist", "Orthopedist", "Ortopedista", "🦴"),
        CatalogEntry("dermatologist", "Dermatologist", "Dermatologista", "🧴"),
        CatalogEntry("vaccinations-travel", "Vaccinations / Travel", "Vacinas / Viagem", "💉"),
    ],
    "transportation": [
        CatalogEntry("airport-transfer", "Airport Transfer", "Transfer Aeroporto", "✈️"),
        CatalogEntry("taxi", "Taxi", "Táxi", "🚕"),
        CatalogEntry("private-driver", "Private Driver", "Motorista Privado", "🚘"),
        CatalogEntry("shuttle-service", "Shuttle Service", "Shuttle", "🚐"),
        CatalogEntry("car-rental", "Car Rental", "Aluguer de Carro", "🚗"),
        CatalogEntry("scooter-rental", "Scooter Rental", "Aluguer de Scooter", "🛵"),
        CatalogEntry("bike-rental", "Bike Rental", "Aluguer de Bicicleta", "🚲"),
        CatalogEntry("bike-repair", "Bike Repair", "Reparação de Bicicleta", "🛠️"),
        CatalogEntry("scooter-repair", "Scooter Repair", "Reparação de Scooter", "🛠️"),
    ],
    "pets": [
        CatalogEntry("veterinarian", "Veterinarian", "Veterinário", "🐾"),
        CatalogEntry("grooming", "Grooming", "Grooming / Tosquia", "✂️"),
        CatalogEntry("dog-walker", "Dog Walker", "Dog Walker", "🚶‍♂️"),
        CatalogEntry("pet-sitting", "Pet Sitting", "Pet Sitting", "🐕"),
        CatalogEntry("pet-boarding", "Pet Boarding / Hotel", "Hotel para Animais", "🏨"),
        CatalogEntry("pet-taxi", "Pet Taxi", "Táxi para Animais", "🚕"),
        CatalogEntry("pet-supplies", "Pet Supplies", "Loja de Animais", "🦴"),
        CatalogEntry("pet-training", "Dog Training", "Treino Canino", "🦮"),
    ],
    "events-entertainment": [
        CatalogEntry("dj", "DJ / Music", "DJ / Música", "🎧"),
        CatalogEntry("live-music", "Live Music", "Música ao Vivo", "🎤"),
        CatalogEntry("event-planner", "Event Planner", "Organização de Eventos", "🎪"),
        CatalogEntry("kids-parties", "Kids Parties", "Festas Infantis", "🥳"),
        CatalogEntry("event-decoration", "Event Decoration", "Decoração de Eventos", "🎈"),
        CatalogEntry("party-rental", "Party Rentals", "Aluguer para Festas", "🪑"),
        CatalogEntry("wedding-planner", "Wedding Planner", "Wedding Planner", "💍"),
    ],
    "professional": [
        CatalogEntry("photography", "Photographer", "Fotógrafo", "📸"),
        CatalogEntry("video-maker", "Video Maker", "Video Maker", "🎥"),
        CatalogEntry("it-service", "IT Services", "Serviços de TI", "💻"),
        CatalogEntry("translation", "Translation", "Tradução", "🌐"),
        CatalogEntry("consulting", "Business Consulting", "Consultoria", "📈"),
        CatalogEntry("insurance-broker", "Insurance Broker", "Mediador de Seguros", "📋"),
        CatalogEntry("accountant", "Accountant", "Contabilista", "📊"),
        CatalogEntry("coworking", "Coworking Space", "Coworking", "🏢"),
        CatalogEntry("web-design", "Web Design & Dev", "Web Design & Desenvolvimento", "🖥️"),
        CatalogEntry("digital-marketing", "Digital Marketing", "Marketing Digital", "📣"),
        CatalogEntry("hr-recruitment", "HR & Recruitment", "RH & Recrutamento", "👥"),
    ],
}

CASCAIS_LOCATIONS: List[str] = [
    "Cascais",
    "Estoril",
    "Monte Estoril",
    "São João do Estoril",
    "São Pedro do Estoril",
    "Carcavelos",
    "Parede",
    "Alcabideche",
    "São Domingos de Rana",
]

_CATEGORY_INDEX: Dict[str, CatalogEntry] = {c.id: c for c in CATEGORIES}
_SUBCATEGORY_INDEX: Dict[str, Dict[str, CatalogEntry]] = {
    category_id: {s.id: s for s in entries}
    for category_id, entries in SUBCATEGORIES.items()
}


def is_known_category(category_id: Optional[str]) -> bool:
    return category_id in _CATEGORY_INDEX and category_id != ALL_CATEGORY.id


def is_known_subcategory(category_id: Optional[str], subcategory_id: Optional[str]) -> bool:
    return subcategory_id in _SUBCATEGORY_INDEX.get(category_id or "", {})


def get_category_label(category_id: str, is_pt: bool) -> str:
    """Localized category label; unknown ids come back unchanged."""
    entry = _CATEGORY_INDEX.get(category_id)
    if entry is None:
        return category_id or "-"
    return entry.label(is_pt)


def get_subcategory_label(category_id: str, subcategory_id: str, is_pt: bool) -> str:
    """Localized subcategory label; unknown ids come back unchanged."""
    entry = _SUBCATEGORY_INDEX.get(category_id, {}).get(subcategory_id)
    if entry is None:
        return subcategory_id or "-"
    return entry.label(is_pt)


def catalog(is_pt: bool) -> List[dict]:
    """Categories with their subcategories, labelled for one locale."""
    return [
        {
            "id": category.id,
            "label": category.label(is_pt),
            "icon": category.icon,
            "subcategories": [
                {"id": sub.id, "label": sub.label(is_pt), "icon": sub.icon}
                for sub in SUBCATEGORIES.get(category.id, [])
            ],
        }
        for category in CATEGORIES
    ]
