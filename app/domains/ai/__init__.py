"""AI 도메인

원격 이미지 분류 모델(Hugging Face Inference API) 추론과 폐기물 분류 연동
"""
