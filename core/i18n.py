"""
User-facing messages in English and Portuguese.
"""
from typing import Dict

MESSAGES: Dict[str, Dict[str, str]] = {
    # Authentication
    "sign_in_to_rate": {
        "en": "You need to be signed in to rate a service.",
        "pt": "Tem de iniciar sessão para avaliar um serviço.",
    },
    "sign_in_to_edit_service": {
        "en": "You must be signed in to create or edit your service.",
        "pt": "Tem de iniciar sessão para criar ou editar o seu serviço.",
    },
    "sign_in_to_create_offer": {
        "en": "You must be signed in to create an offer.",
        "pt": "Tem de iniciar sessão para criar uma oferta.",
    },
    "sign_in_to_list_property": {
        "en": "You must be signed in to list a property.",
        "pt": "Tem de iniciar sessão para anunciar um imóvel.",
    },
    "sign_in_to_upload": {
        "en": "You must be signed in to upload images.",
        "pt": "Tem de iniciar sessão para carregar imagens.",
    },
    # Ratings
    "rating_both_criteria": {
        "en": "Please give a rating for both criteria.",
        "pt": "Por favor, atribua uma classificação em ambos os critérios.",
    },
    "rating_already_submitted": {
        "en": "You have already rated this service. You can only rate it once.",
        "pt": "Já avaliou este serviço. Só pode avaliar uma vez.",
    },
    "rating_own_service": {
        "en": "You cannot rate your own service.",
        "pt": "Não pode avaliar o seu próprio serviço.",
    },
    "rating_failed": {
        "en": "Something went wrong while submitting your rating.",
        "pt": "Ocorreu um erro ao submeter a sua avaliação.",
    },
    "rating_submitted": {
        "en": "Rating submitted – thank you!",
        "pt": "Avaliação enviada – obrigado!",
    },
    "no_rating_yet": {
        "en": "No rating yet",
        "pt": "Sem avaliação",
    },
    # Shared form validation
    "enter_service_name": {
        "en": "Please enter your service name.",
        "pt": "Por favor, indique o nome do seu serviço.",
    },
    "enter_contact_email": {
        "en": "Please enter a contact email.",
        "pt": "Por favor, indique o email de contacto.",
    },
    "choose_category": {
        "en": "Please choose a category.",
        "pt": "Por favor, escolha uma categoria.",
    },
    "phone_nine_digits": {
        "en": "Please enter a 9-digit phone number.",
        "pt": "Por favor, indique um número de telefone com 9 dígitos.",
    },
    "choose_service_area": {
        "en": "Please choose a service area.",
        "pt": "Por favor, escolha uma zona de atuação.",
    },
    # Offers
    "enter_offer_title": {
        "en": "Please enter a title.",
        "pt": "Por favor, indique o título da oferta.",
    },
    "invalid_list_price": {
        "en": "Invalid list price (original price).",
        "pt": "Preço de tabela inválido.",
    },
    "invalid_offer_price": {
        "en": "Invalid offer price.",
        "pt": "Preço promocional inválido.",
    },
    "invalid_valid_until": {
        "en": "Invalid 'valid until' date.",
        "pt": "Data de validade inválida.",
    },
    "valid_until_after_today": {
        "en": "The 'valid until' date must be after today.",
        "pt": "A data de validade deve ser depois de hoje.",
    },
    # Properties
    "enter_title": {
        "en": "Please enter a title.",
        "pt": "Indique o título.",
    },
    "choose_location": {
        "en": "Please choose location.",
        "pt": "Escolha a localização.",
    },
    "write_description": {
        "en": "Please write a description.",
        "pt": "Escreva uma descrição.",
    },
    "invalid_price": {
        "en": "Invalid price.",
        "pt": "Preço inválido.",
    },
    "enter_contact_name": {
        "en": "Please enter contact name.",
        "pt": "Indique o nome de contacto.",
    },
    "enter_email": {
        "en": "Please enter e-mail.",
        "pt": "Indique o e-mail.",
    },
    "invalid_email": {
        "en": "Please enter a valid e-mail address.",
        "pt": "Indique um endereço de e-mail válido.",
    },
    "enter_usable_area": {
        "en": "Please enter usable area.",
        "pt": "Indique a área útil.",
    },
    "enter_land_area": {
        "en": "Please enter land area.",
        "pt": "Indique a área do terreno.",
    },
    "select_bedrooms": {
        "en": "Please select bedrooms.",
        "pt": "Indique os quartos.",
    },
    "select_bathrooms": {
        "en": "Please select bathrooms.",
        "pt": "Indique as casas de banho.",
    },
    "max_photos_reached": {
        "en": "You already reached the maximum photos.",
        "pt": "Já atingiu o máximo de fotos.",
    },
    "failed_to_load_properties": {
        "en": "Failed to load properties.",
        "pt": "Falha ao carregar imóveis.",
    },
    # Property search requests
    "enter_name": {
        "en": "Please enter your name.",
        "pt": "Indique o seu nome.",
    },
    "request_dates_order": {
        "en": "The end date must be after the start date.",
        "pt": "A data de fim deve ser depois da data de início.",
    },
    "request_received": {
        "en": "Thank you! We’ve received your request and will get back to you soon.",
        "pt": "Obrigado! Recebemos o seu pedido e entraremos em contacto em breve.",
    },
    # Uploads
    "upload_failed": {
        "en": "Failed to upload image.",
        "pt": "Falha ao carregar a imagem.",
    },
    "invalid_image": {
        "en": "Invalid image file.",
        "pt": "Ficheiro de imagem inválido.",
    },
    "image_too_large": {
        "en": "Image is too large.",
        "pt": "A imagem é demasiado grande.",
    },
    # Persistence
    "save_failed": {
        "en": "Something went wrong while saving. Please try again.",
        "pt": "Ocorreu um erro ao guardar. Tente novamente.",
    },
    # Request errors
    "request_invalid": {
        "en": "Some fields are missing or invalid.",
        "pt": "Alguns campos estão em falta ou são inválidos.",
    },
    "unexpected_error": {
        "en": "An unexpected error occurred. Please try again.",
        "pt": "Ocorreu um erro inesperado. Tente novamente.",
    },
}


def translate(key: str, locale: str) -> str:
    """Look up a message, falling back to English and then to the key itself."""
    entry = MESSAGES.get(key)
    if entry is None:
        return key
    return entry.get(locale) or entry.get("en") or key
