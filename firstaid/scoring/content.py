"""Localized screening content.

Interpretation text, recommendations and questionnaire wording for each
instrument, keyed by instrument, severity band and language. English is
complete; other languages may be partial and fall back to English.
"""

from firstaid.scoring.base import ScreeningType, SeverityBand

DEFAULT_LANGUAGE = "en"

# =========================================================================
# Interpretations
# =========================================================================
INTERPRETATIONS: dict[ScreeningType, dict[SeverityBand, dict[str, str]]] = {
    ScreeningType.PHQ9: {
        SeverityBand.MINIMAL: {
            "en": "Minimal depression symptoms. Your responses suggest you may have few or no symptoms of depression.",
            "hi": "न्यूनतम अवसाद के लक्षण। आपके उत्तर सुझाते हैं कि आपमें अवसाद के कम या कोई लक्षण नहीं हैं।",
        },
        SeverityBand.MILD: {
            "en": "Mild depression symptoms. You may be experiencing some symptoms that could benefit from attention and self-care.",
            "hi": "हल्के अवसाद के लक्षण। आप कुछ ऐसे लक्षण अनुभव कर रहे हों जिनमें देखभाल और ध्यान की आवश्यकता हो।",
        },
        SeverityBand.MODERATE: {
            "en": "Moderate depression symptoms. Consider speaking with a mental health professional about your symptoms.",
            "hi": "मध्यम अवसाद के लक्षण। अपने लक्षणों के बारे में किसी मानसिक स्वास्थ्य पेशेवर से बात करने पर विचार करें।",
        },
        SeverityBand.MODERATE_SEVERE: {
            "en": "Moderate to severe depression symptoms. It's recommended to seek professional help to address these symptoms.",
            "hi": "मध्यम से गंभीर अवसाद के लक्षण। इन लक्षणों के लिए पेशेवर सहायता लेने की सिफारिश की जाती है।",
        },
        SeverityBand.SEVERE: {
            "en": "Severe depression symptoms. Please consider seeking immediate professional help. These symptoms can significantly impact your daily life.",
            "hi": "गंभीर अवसाद के लक्षण। कृपया तत्काल पेशेवर सहायता लेने पर विचार करें। ये लक्षण आपके दैनिक जीवन को महत्वपूर्ण रूप से प्रभावित कर सकते हैं।",
        },
    },
    ScreeningType.GAD7: {
        SeverityBand.MINIMAL: {
            "en": "Minimal anxiety symptoms. Your responses suggest you may have few or no symptoms of anxiety.",
            "hi": "न्यूनतम चिंता के लक्षण। आपके उत्तर सुझाते हैं कि आपमें चिंता के कम या कोई लक्षण नहीं हैं।",
        },
        SeverityBand.MILD: {
            "en": "Mild anxiety symptoms. You may be experiencing some anxiety that could benefit from relaxation techniques and self-care.",
            "hi": "हल्की चिंता के लक्षण। आप कुछ चिंता अनुभव कर रहे हों जिसमें आराम की तकनीक और स्वयं की देखभाल से फायदा हो सकता है।",
        },
        SeverityBand.MODERATE: {
            "en": "Moderate anxiety symptoms. Consider learning anxiety management techniques or speaking with a counsellor.",
            "hi": "मध्यम चिंता के लक्षण। चिंता प्रबंधन तकनीक सीखने या काउंसलर से बात करने पर विचार करें।",
        },
        SeverityBand.SEVERE: {
            "en": "Severe anxiety symptoms. It's recommended to seek professional help. These symptoms may be significantly impacting your daily functioning.",
            "hi": "गंभीर चिंता के लक्षण। पेशेवर सहायता लेने की सिफारिश की जाती है। ये लक्षण आपके दैनिक कार्यकलाप को महत्वपूर्ण रूप से प्रभावित कर सकते हैं।",
        },
    },
}

# =========================================================================
# Recommendations
# =========================================================================
RECOMMENDATIONS: dict[ScreeningType, dict[SeverityBand, dict[str, list[str]]]] = {
    ScreeningType.PHQ9: {
        SeverityBand.MINIMAL: {
            "en": [
                "Continue maintaining good mental health practices",
                "Stay connected with friends and family",
                "Engage in regular physical activity",
                "Practice stress management techniques",
            ],
            "hi": [
                "अच्छी मानसिक स्वास्थ्य प्रथाओं को बनाए रखना जारी रखें",
                "दोस्तों और परिवार के साथ जुड़े रहें",
                "नियमित शारीरिक गतिविधि में भाग लें",
            ],
        },
        SeverityBand.MILD: {
            "en": [
                "Monitor your mood and symptoms",
                "Practice self-care and relaxation techniques",
                "Maintain social connections",
                "Consider lifestyle changes like regular exercise",
            ],
        },
        SeverityBand.MODERATE: {
            "en": [
                "Consider speaking with a mental health professional",
                "Explore counselling or therapy options",
                "Practice daily mood tracking",
                "Build a support network",
            ],
        },
        SeverityBand.MODERATE_SEVERE: {
            "en": [
                "Seek professional mental health support",
                "Consider therapy or counselling",
                "Reach out to trusted friends or family",
                "Explore treatment options with a healthcare provider",
            ],
        },
        SeverityBand.SEVERE: {
            "en": [
                "Seek immediate professional help",
                "Contact a mental health crisis line if needed",
                "Don't hesitate to reach out for support",
                "Consider speaking with your healthcare provider about treatment options",
            ],
        },
    },
    ScreeningType.GAD7: {
        SeverityBand.MINIMAL: {
            "en": [
                "Continue current stress management practices",
                "Maintain healthy lifestyle habits",
                "Stay socially connected",
                "Practice mindfulness or relaxation when stressed",
            ],
        },
        SeverityBand.MILD: {
            "en": [
                "Learn and practice anxiety management techniques",
                "Try deep breathing and relaxation exercises",
                "Monitor anxiety triggers",
                "Maintain regular sleep and exercise routines",
            ],
        },
        SeverityBand.MODERATE: {
            "en": [
                "Consider learning cognitive-behavioral techniques",
                "Speak with a counsellor about anxiety management",
                "Practice regular relaxation exercises",
                "Consider joining a support group",
            ],
        },
        SeverityBand.SEVERE: {
            "en": [
                "Seek professional help for anxiety management",
                "Consider therapy or counselling",
                "Learn about anxiety disorders and treatment options",
                "Build a strong support network",
            ],
        },
    },
}

# =========================================================================
# Questionnaires
# =========================================================================
RESPONSE_OPTIONS: dict[str, list[str]] = {
    "en": ["Not at all", "Several days", "More than half the days", "Nearly every day"],
    "hi": ["बिल्कुल नहीं", "कई दिन", "आधे से ज्यादा दिन", "लगभग हर दिन"],
}

QUESTIONNAIRES: dict[ScreeningType, dict[str, dict]] = {
    ScreeningType.PHQ9: {
        "en": {
            "title": "PHQ-9 Depression Screening",
            "description": "This screening helps assess symptoms of depression.",
            "timeframe": "Over the last 2 weeks",
            "questions": [
                "Little interest or pleasure in doing things",
                "Feeling down, depressed, or hopeless",
                "Trouble falling or staying asleep, or sleeping too much",
                "Feeling tired or having little energy",
                "Poor appetite or overeating",
                "Feeling bad about yourself - or that you are a failure or have let yourself or your family down",
                "Trouble concentrating on things, such as reading the newspaper or watching television",
                "Moving or speaking so slowly that other people could have noticed. Or the opposite - being so fidgety or restless that you have been moving around a lot more than usual",
                "Thoughts that you would be better off dead, or of hurting yourself",
            ],
        },
        "hi": {
            "title": "PHQ-9 अवसाद स्क्रीनिंग",
            "description": "यह स्क्रीनिंग अवसाद के लक्षणों का मूल्यांकन करने में मदद करती है।",
            "timeframe": "पिछले 2 सप्ताह में",
            "questions": [
                "कामों में कम रुचि या खुशी महसूस करना",
                "उदास, अवसादग्रस्त, या निराश महसूस करना",
                "सोने में परेशानी, या बहुत ज्यादा सोना",
                "थकान महसूस करना या ऊर्जा कम होना",
                "भूख कम लगना या ज्यादा खाना",
                "अपने बारे में बुरा महसूस करना - या कि आप असफल हैं या आपने खुद को या अपने परिवार को निराश किया है",
                "चीजों पर ध्यान केंद्रित करने में परेशानी, जैसे अखबार पढ़ना या टेलीविजन देखना",
                "इतना धीरे चलना या बोलना कि दूसरों ने ध्यान दिया हो। या इसके विपरीत - इतना बेचैन होना कि आप सामान्य से बहुत अधिक इधर-उधर घूम रहे हों",
                "ऐसे विचार कि आप मर जाएं तो बेहतर होगा, या खुद को नुकसान पहुंचाने के विचार",
            ],
        },
    },
    ScreeningType.GAD7: {
        "en": {
            "title": "GAD-7 Anxiety Screening",
            "description": "This screening helps assess symptoms of anxiety.",
            "timeframe": "Over the last 2 weeks",
            "questions": [
                "Feeling nervous, anxious, or on edge",
                "Not being able to stop or control worrying",
                "Worrying too much about different things",
                "Trouble relaxing",
                "Being so restless that it is hard to sit still",
                "Becoming easily annoyed or irritable",
                "Feeling afraid, as if something awful might happen",
            ],
        },
        "hi": {
            "title": "GAD-7 चिंता स्क्रीनिंग",
            "description": "यह स्क्रीनिंग चिंता के लक्षणों का मूल्यांकन करने में मदद करती है।",
            "timeframe": "पिछले 2 सप्ताह में",
            "questions": [
                "घबराहट, चिंतित, या बेचैन महसूस करना",
                "चिंता को रोकने या नियंत्रित करने में असमर्थ होना",
                "विभिन्न बातों के बारे में बहुत ज्यादा चिंता करना",
                "आराम करने में परेशानी",
                "इतना बेचैन होना कि शांत बैठना मुश्किल हो",
                "आसानी से नाराज़ या चिड़चिड़ा हो जाना",
                "डर लगना, जैसे कि कुछ बुरा होने वाला है",
            ],
        },
    },
}
