"""Chat response templates.

Bot reply fragments keyed by language and category. English covers every
category; other languages may be partial and fall back to English.
"""

from firstaid.chat.models import Category

DEFAULT_LANGUAGE = "en"

CRISIS_QUICK_REPLIES = [
    "Show crisis resources",
    "Connect with counsellor",
    "Find helplines",
]

CATEGORY_QUICK_REPLIES = [
    "Tell me more",
    "Take screening",
    "Book session",
    "Browse resources",
]

GENERIC_QUICK_REPLIES = [
    "Take screening test",
    "Book counselling",
    "Browse resources",
]

WELCOME_QUICK_REPLIES = [
    "I'm feeling anxious",
    "I'm feeling sad",
    "I'm stressed out",
    "I can't sleep",
    "I need help",
]

GENERIC_MESSAGES = {
    "en": "I'm here to listen and support you. Can you tell me more about what's on your mind?",
    "hi": "मैं आपकी बात सुनने और आपका साथ देने के लिए यहाँ हूँ। क्या आप मुझे बता सकते हैं कि आपके मन में क्या चल रहा है?",
}

WELCOME_MESSAGES = {
    "en": "Hello! I'm here to provide mental health first aid support. How are you feeling today?",
    "hi": "नमस्ते! मैं मानसिक स्वास्थ्य प्राथमिक सहायता देने के लिए यहाँ हूँ। आज आप कैसा महसूस कर रहे हैं?",
}

RESPONSE_TEMPLATES: dict[str, dict[Category, dict]] = {
    "en": {
        Category.ANXIETY: {
            "validation": "I understand you're feeling anxious right now. That's a very real and valid experience.",
            "strategies": [
                "Try the 4-7-8 breathing technique: Breathe in for 4, hold for 7, exhale for 8.",
                "Ground yourself using the 5-4-3-2-1 technique: Name 5 things you see, 4 you can touch, 3 you hear, 2 you smell, 1 you taste.",
                "Progressive muscle relaxation can help: Tense and release each muscle group from your toes to your head.",
            ],
            "psychoeducation": "Anxiety is your body's natural response to stress. While uncomfortable, these feelings are temporary and manageable.",
            "next_steps": "Consider taking our anxiety screening (GAD-7) or booking a session with a counsellor for ongoing support.",
        },
        Category.DEPRESSION: {
            "validation": "I hear that you're going through a difficult time. These feelings of sadness and emptiness are real.",
            "strategies": [
                "Try to maintain a daily routine, even a simple one.",
                "Engage in small, achievable activities that used to bring you joy.",
                "Consider reaching out to a trusted friend or family member.",
            ],
            "psychoeducation": "Depression affects how you think, feel, and act. It's a medical condition that can be treated effectively.",
            "next_steps": "Taking our depression screening (PHQ-9) can help assess your symptoms. Professional support is available.",
        },
        Category.STRESS_BURNOUT: {
            "validation": "Feeling overwhelmed by stress and responsibilities is more common than you might think.",
            "strategies": [
                "Break large tasks into smaller, manageable steps.",
                "Practice saying 'no' to additional commitments when possible.",
                "Schedule regular breaks and self-care activities.",
            ],
            "psychoeducation": "Chronic stress can lead to burnout, affecting your physical and mental health. Recovery is possible with proper support.",
            "next_steps": "Consider stress management techniques and speaking with a counsellor about workload management.",
        },
        Category.SLEEP: {
            "validation": "Sleep difficulties can be frustrating and impact many areas of your life.",
            "strategies": [
                "Maintain a consistent sleep schedule, even on weekends.",
                "Create a relaxing bedtime routine without screens.",
                "Keep your bedroom cool, dark, and quiet.",
            ],
            "psychoeducation": "Good sleep hygiene is essential for mental health. Sleep problems often improve with consistent practices.",
            "next_steps": "If sleep problems persist, consider discussing them with a healthcare provider or counsellor.",
        },
        Category.ACADEMIC_STRESS: {
            "validation": "Academic pressure can feel overwhelming, especially when you want to do well.",
            "strategies": [
                "Break study sessions into focused 25-minute blocks with short breaks.",
                "Create a realistic study schedule that includes time for rest.",
                "Reach out to teachers or academic advisors when you need help.",
            ],
            "psychoeducation": "Academic stress is common among students. Learning effective study strategies can reduce anxiety and improve performance.",
            "next_steps": "Our counsellors can help with study strategies and managing academic pressure.",
        },
        Category.SOCIAL_ISOLATION: {
            "validation": "Feeling disconnected from others can be lonely and painful.",
            "strategies": [
                "Start with small social interactions, like greeting classmates or colleagues.",
                "Join clubs or activities aligned with your interests.",
                "Consider online communities related to your hobbies or concerns.",
            ],
            "psychoeducation": "Social connections are vital for mental health. Building relationships takes time and practice.",
            "next_steps": "Our peer support forum might be a good place to start connecting with others who understand.",
        },
        Category.CRISIS: {
            "immediate_safety": "I'm very concerned about what you've shared. Your life has value, and help is available right now.",
            "crisis_resources": "Please reach out immediately to a crisis helpline or emergency services if you're in immediate danger.",
            "support_available": "You don't have to go through this alone. Professional help and support are available.",
            "next_steps": "Please consider speaking with a mental health professional as soon as possible.",
        },
    },
    "hi": {
        Category.ANXIETY: {
            "validation": "मैं समझ सकता हूँ कि आप अभी चिंतित महसूस कर रहे हैं। यह एक वास्तविक और मान्य अनुभव है।",
            "strategies": [
                "4-7-8 श्वास तकनीक आज़माएं: 4 की गिनती में सांस लें, 7 तक रोकें, 8 में छोड़ें।",
                "5-4-3-2-1 तकनीक से खुद को स्थिर करें: 5 चीजें देखें, 4 को छुएं, 3 सुनें, 2 सूंघें, 1 चखें।",
            ],
            "psychoeducation": "चिंता तनाव के लिए आपके शरीर की प्राकृतिक प्रतिक्रिया है। असहज होने पर भी, ये भावनाएं अस्थायी हैं।",
            "next_steps": "हमारी चिंता जांच (GAD-7) लेने या काउंसलर के साथ सत्र बुक करने पर विचार करें।",
        },
        Category.CRISIS: {
            "immediate_safety": "आपने जो साझा किया है उसे लेकर मैं बहुत चिंतित हूँ। आपका जीवन मूल्यवान है, और मदद अभी उपलब्ध है।",
            "crisis_resources": "यदि आप तत्काल खतरे में हैं तो कृपया तुरंत किसी संकट हेल्पलाइन या आपातकालीन सेवाओं से संपर्क करें।",
            "support_available": "आपको इससे अकेले नहीं गुजरना है। पेशेवर मदद और सहायता उपलब्ध है।",
            "next_steps": "कृपया जल्द से जल्द किसी मानसिक स्वास्थ्य पेशेवर से बात करने पर विचार करें।",
        },
    },
}
