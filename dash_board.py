DASHBOARD_TXT = """
## 🧭 About – LifeChoice AI

Build with the latest **AI models** for life decisions.
Get a personalized analysis and fold AI insights into your decision-making in less than 3 minutes.

---

### ✨ What this app does

- **Personalized analysis**
  Tailored insights based on your personality tags and your current situation.

- **AI-powered decisions**
  Three requests are sent in parallel to an OpenAI-compatible chat model:
  an expert recommendation, a four-part trait analysis, and four-part advice & outlook.

- **Visual analytics**
  A comprehensive score and a six-dimension radar chart computed locally from your sliders,
  shown even if the model cannot be reached.

---

### 🧑‍💻 How to use it

1. Describe your dilemma (max 50 characters), e.g. *Should I change jobs?*
2. Pick your **age bracket** and **gender** (both required).
3. Optionally add MBTI / DISC / Enneagram, constellation, zodiac and a few self-perception words.
4. Move the **emotion** and **decision-factor** sliders (1 = not at all, 10 = very much).
5. Add your own factors in the **custom factors** table if needed.
6. Click **Start analysis**.

Nothing is stored: your answers live only in this browser session.

---

### ⚙️ Configuration

| Variable | Meaning |
|---|---|
| `LLM_API_KEY` | API key for the provider (required for real answers) |
| `LLM_BASE_URL` | OpenAI-compatible base URL, default `https://api.siliconflow.cn/v1` |
| `LLM_MODEL_NAME` | Model name, default `Qwen/QwQ-32B` |
| `LLM_TIMEOUT` | Optional HTTP timeout in seconds |
| `UI_TEST_MODE` | `true` to skip the network and return canned answers |

Run with `python app.py` (add `--mode test` for UI test mode).
"""
