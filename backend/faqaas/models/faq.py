# faqaas/models/faq.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from faqaas.database.connection import Base


class FAQRecord(Base):
    """
    An FAQ only owns its id; everything visible lives in its texts.
    A row without texts is treated as not found by all read paths.
    """
    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, index=True)

    texts = relationship("FAQTextRecord", back_populates="faq", order_by="FAQTextRecord.id")


class FAQTextRecord(Base):
    __tablename__ = "faq_texts"
    __table_args__ = (
        UniqueConstraint("faq_id", "locale", name="texts_faq_id_locale"),
    )

    id = Column(Integer, primary_key=True, index=True)
    faq_id = Column(Integer, ForeignKey("faqs.id"), nullable=False, index=True)
    locale = Column(String, nullable=False)
    question = Column(Text, nullable=False, default="")
    answer = Column(Text, nullable=False, default="")

    faq = relationship("FAQRecord", back_populates="texts")
