from typing import Dict

from healthapp.services.classification import Classification

# 체질별 정적 추천 콘텐츠 (식단 / 일과)
DIET: Dict[Classification, Dict] = {
    Classification.VATA: {
        "title": "Vata Pacifying Diet (Warm & Grounding)",
        "summary": "Focus on warm, cooked, nourishing foods. Eat at regular times.",
        "items": [
            {"label": "Grains", "text": "Rice, cooked oats, quinoa."},
            {"label": "Vegetables", "text": "Cooked root vegetables (carrots, beets), asparagus, sweet potatoes."},
            {"label": "Fruits", "text": "Ripe bananas, avocados, mangoes, cooked apples."},
            {"label": "Proteins", "text": "Mung beans (dal), chicken, fish, tofu."},
            {"label": "Avoid", "text": "Cold/iced drinks, raw salads, dry/light foods (crackers, popcorn), caffeine."},
        ],
    },
    Classification.PITTA: {
        "title": "Pitta Pacifying Diet (Cool & Soothing)",
        "summary": "Focus on cool, refreshing, and slightly dry foods. Avoid spicy and fermented foods.",
        "items": [
            {"label": "Grains", "text": "Basmati rice, barley, oats."},
            {"label": "Vegetables", "text": "Leafy greens (kale, chard), cucumber, broccoli, zucchini."},
            {"label": "Fruits", "text": "Sweet fruits like grapes, melons, cherries, coconut."},
            {"label": "Proteins", "text": "Chickpeas, black beans, chicken, egg whites."},
            {"label": "Avoid", "text": "Spicy foods (chilies, cayenne), sour foods (vinegar, aged cheese), alcohol, coffee."},
        ],
    },
    Classification.KAPHA: {
        "title": "Kapha Pacifying Diet (Light & Stimulating)",
        "summary": "Focus on light, dry, and warm foods. Emphasize spices and pungent flavors.",
        "items": [
            {"label": "Grains", "text": "Millet, barley, buckwheat, corn."},
            {"label": "Vegetables", "text": "All leafy greens, peppers, onions, broccoli, cabbage."},
            {"label": "Fruits", "text": "Apples, pears, pomegranates, berries."},
            {"label": "Proteins", "text": "Lentils, chickpeas, beans, lean chicken."},
            {"label": "Avoid", "text": "Heavy/oily foods, dairy (cheese, ice cream), sweet foods, processed sugars, deep-fried foods."},
        ],
    },
}

ROUTINE: Dict[Classification, Dict] = {
    Classification.VATA: {
        "title": "Vata Balancing Routine (Consistency)",
        "summary": "Your key is regularity. Try to wake, eat, and sleep at the same times each day.",
        "items": [
            {"label": "6:30 AM", "text": "Wake up, oil massage (Abhyanga) with warm sesame oil."},
            {"label": "7:00 AM", "text": "Gentle, grounding exercise (Yoga, Tai Chi)."},
            {"label": "8:00 AM", "text": "Warm, nourishing breakfast."},
            {"label": "10:00 PM", "text": "Bedtime. Ensure you get plenty of rest."},
        ],
    },
    Classification.PITTA: {
        "title": "Pitta Balancing Routine (Moderation)",
        "summary": "Your key is to stay cool and avoid intensity. Make time for leisure.",
        "items": [
            {"label": "6:00 AM", "text": "Wake up, rinse face with cool water."},
            {"label": "7:00 AM", "text": "Cooling exercise (swimming, light jog in cool air). Avoid peak sun."},
            {"label": "12:00 PM", "text": "Eat your main meal at mid-day, when your digestion is strongest."},
            {"label": "10:30 PM", "text": "Bedtime. Avoid late-night work."},
        ],
    },
    Classification.KAPHA: {
        "title": "Kapha Balancing Routine (Stimulation)",
        "summary": "Your key is activity and variety. Avoid daytime napping and oversleeping.",
        "items": [
            {"label": "5:30 AM", "text": "Wake up before sunrise. This is most important!"},
            {"label": "6:00 AM", "text": "Vigorous, stimulating exercise (running, cycling, cardio)."},
            {"label": "8:00 AM", "text": "Light breakfast, or skip it if not hungry."},
            {"label": "11:00 PM", "text": "Bedtime. Avoid sleeping too late or too long."},
        ],
    },
}


def get_recommendations(classification: Classification) -> Dict:
    return {
        "classification": classification.value,
        "diet": DIET[classification],
        "routine": ROUTINE[classification],
    }
