CREATIVE_TEMPLATE = """You are a Master Creative Director.
User Input: "{subject}"

CRITICAL INSTRUCTION: If the User Input is in Hebrew (or any non-English language), TRANSLATE it to English first.
Context: {context}

TASK: Generate {count} distinct, highly detailed artistic prompts based on the translated User Input.
OUTPUT LANGUAGE: English ONLY.
CRITICAL REQUIREMENT: Output ONLY the prompts as a valid JSON array of strings.
Example output: ["A futuristic city at sunset", "A watercolor painting of a city"]"""

EDITING_CONTEXT = "User is editing an uploaded image."
NEW_IMAGE_CONTEXT = "User is generating a new image from scratch."

STYLE_TEMPLATE = """TASK: Convert the User Input into a detailed prompt for a {style} style image.

User Input: "{subject}"

INSTRUCTIONS:
1. Detect the language of the User Input.
2. If it is Hebrew (or not English), TRANSLATE the meaning to English.
3. Create a descriptive prompt in English that fits the "{style}" style.

OUTPUT: Provide ONLY the final English prompt text. No explanations."""
