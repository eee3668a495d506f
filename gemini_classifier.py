"""
Gemini API Integration for Waste Classification
Sends images or questions to Gemini and turns the answers into structured results
"""

import logging
import os

import google.generativeai as genai
from dotenv import load_dotenv
from PIL import Image

from fallback_classifier import answer_offline, classify_offline
from guidance_tables import suggestions_for
from response_normalizer import normalize
from type_inference import infer_type
from waste_types import SOURCE_GEMINI, WasteAnswer

load_dotenv()

logger = logging.getLogger(__name__)

IMAGE_PROMPT = (
    "Analyze this image and classify the waste item. Identify what material it is made of "
    "(plastic, paper, glass, metal, organic, etc.) and whether it is recyclable. Provide details "
    "on proper disposal methods, environmental impact, and any specific recycling guidelines."
)

TEXT_PROMPT = (
    "Classify this waste item from the user's description. Identify what material it is made of "
    "(plastic, paper, glass, metal, organic, etc.) and whether it is recyclable. Provide details "
    "on proper disposal methods, environmental impact, tips, and any specific recycling guidelines."
    "\n\nItem: {description}"
)

QUESTION_PROMPT = (
    "You are EcoGuide, a waste management expert. Answer the user's question about waste "
    "disposal, recycling, or composting. Be helpful, clear, and concise."
    "\n\nUser Question: {question}\n\nAnswer:"
)


class WasteClassifier:
    def __init__(self, api_key=None, model_name=None):
        """
        Initialize Gemini API client and pick a fast, vision-capable model.
        Create this once and reuse it across requests.

        Args:
            api_key: Gemini API key (defaults to GEMINI_API_KEY)
            model_name: Preferred model tried before the built-in list (defaults to GEMINI_MODEL)
        """
        api_key = api_key or os.getenv('GEMINI_API_KEY')
        if not api_key:
            raise ValueError("GEMINI_API_KEY not found in environment variables")

        genai.configure(api_key=api_key)

        # Ordered by preference: fast, vision-capable models first, then text fallback
        preferred_models = [
            'gemini-2.0-flash',
            'gemini-2.5-flash',
            'gemini-1.5-flash',
            'gemini-1.5-pro',
            'gemini-pro',  # text-only fallback
        ]
        model_name = model_name or os.getenv('GEMINI_MODEL')
        if model_name:
            preferred_models.insert(0, model_name)

        self.model = None
        self.model_name = None
        self.supports_vision = False

        for candidate in preferred_models:
            try:
                self.model = genai.GenerativeModel(candidate)
            except Exception as e:
                logger.debug("Model %s unavailable: %s", candidate, e)
                continue
            self.model_name = candidate
            # Basic heuristic for vision support
            self.supports_vision = any(token in candidate.lower() for token in ['vision', 'flash', '1.5', '2.0', '2.5'])
            logger.info("Loaded Gemini model: %s (vision support: %s)", self.model_name, self.supports_vision)
            break

        if self.model is None:
            raise ValueError("Could not initialize any Gemini model. Check your API key and model availability.")

        self.generation_config = {
            "temperature": 0.2,
            "max_output_tokens": 512,
        }

        # Last text received from Gemini, kept for logging
        self.last_raw_response = ""

    # ---------------------- helpers ---------------------- #

    @staticmethod
    def _to_pil_and_downscale(image, max_dim: int = 1024) -> Image.Image:
        """
        Convert a numpy/OpenCV array or PIL image to PIL and downscale to max_dim.
        """
        if not isinstance(image, Image.Image):
            if hasattr(image, "shape"):
                if len(image.shape) == 3 and image.shape[2] == 3:
                    image = Image.fromarray(image[:, :, ::-1])  # BGR to RGB
                else:
                    image = Image.fromarray(image)
            else:
                raise TypeError("Unsupported image type for conversion to PIL.")

        w, h = image.size
        if max(w, h) > max_dim:
            scale = max_dim / float(max(w, h))
            image = image.resize((int(w * scale), int(h * scale)))

        return image

    def _generate(self, content):
        response = self.model.generate_content(content, generation_config=self.generation_config)
        text = response.text or ""
        self.last_raw_response = text
        return text

    # ---------------------- remote calls ---------------------- #

    def analyze_image(self, image, prompt=None):
        """
        Ask Gemini to describe a waste item in an image.

        Args:
            image: PIL Image or numpy array
            prompt: Optional prompt overriding the default analysis request

        Returns:
            Raw analysis text from Gemini
        """
        if not self.supports_vision:
            raise RuntimeError(f"Model {self.model_name} does not support image input")

        image = self._to_pil_and_downscale(image)
        return self._generate([prompt or IMAGE_PROMPT, image])

    def analyze_text(self, prompt):
        """Send a text-only prompt to Gemini and return the raw answer."""
        return self._generate(prompt)

    # ---------------------- classification ---------------------- #

    def classify_image(self, image, hint="", prompt=None):
        """
        Classify a waste item from an image.

        Args:
            image: PIL Image or numpy array
            hint: Optional user description, used by the offline fallback
            prompt: Optional prompt overriding the default analysis request

        Returns:
            ClassificationResult from the normalizer, or the offline result when
            Gemini fails or returns no text
        """
        try:
            analysis = self.analyze_image(image, prompt=prompt)
        except Exception as e:
            logger.warning("Gemini image analysis failed, using offline classification: %s", e)
            return classify_offline(hint)

        if not analysis.strip():
            logger.warning("Gemini returned an empty analysis, using offline classification")
            return classify_offline(hint)

        return normalize(analysis)

    def classify_text(self, description):
        """
        Classify a waste item from a text description.

        Returns:
            ClassificationResult from the normalizer, or the offline result when
            Gemini fails or returns no text
        """
        try:
            analysis = self.analyze_text(TEXT_PROMPT.format(description=description))
        except Exception as e:
            logger.warning("Gemini text analysis failed, using offline classification: %s", e)
            return classify_offline(description)

        if not analysis.strip():
            return classify_offline(description)

        return normalize(analysis)

    def ask_about_waste(self, question):
        """
        Answer a user question about waste disposal.

        Args:
            question: User's question

        Returns:
            WasteAnswer with Gemini's answer, or the local knowledge-base answer
            when Gemini is unavailable
        """
        try:
            answer = self.analyze_text(QUESTION_PROMPT.format(question=question))
        except Exception as e:
            logger.warning("Gemini question failed, answering from local knowledge base: %s", e)
            return answer_offline(question)

        if not answer.strip():
            return answer_offline(question)

        waste_type = infer_type(question)
        return WasteAnswer(
            answer=answer.strip(),
            waste_type=waste_type,
            suggestions=tuple(suggestions_for(waste_type)),
            source=SOURCE_GEMINI,
        )
