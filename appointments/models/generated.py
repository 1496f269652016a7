from sqlalchemy import Column, Enum, ForeignKey, Integer, Table, Text, UniqueConstraint, text

from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()
metadata = Base.metadata


class Services(Base):
    __tablename__ = 'services'

    name = Column(Text, nullable=False)
    duration_min = Column(Integer, nullable=False, server_default=text('30'))
    buffer_before_min = Column(Integer, nullable=False, server_default=text('0'))
    buffer_after_min = Column(Integer, nullable=False, server_default=text('0'))
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    id = Column(Integer, primary_key=True)
    description = Column(Text)
    min_advance_hours = Column(Integer)  # NULL = business default
    max_advance_days = Column(Integer)  # NULL = business default
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    appointments = relationship('Appointments', back_populates='service')


class TeamMembers(Base):
    __tablename__ = 'team_members'

    name = Column(Text, nullable=False)
    taking_appointments = Column(Integer, nullable=False, server_default=text('1'))
    id = Column(Integer, primary_key=True)
    email = Column(Text)
    role = Column(Text)
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    availability = relationship('TeamMemberAvailability', back_populates='team_member')
    appointments = relationship('Appointments', back_populates='team_member')


t_team_member_services = Table(
    'team_member_services', metadata,
    Column('team_member_id', ForeignKey('team_members.id', ondelete='CASCADE'), nullable=False),
    Column('service_id', ForeignKey('services.id', ondelete='CASCADE'), nullable=False),
    UniqueConstraint('team_member_id', 'service_id')
)


class TeamMemberAvailability(Base):
    __tablename__ = 'team_member_availability'
    __table_args__ = (
        UniqueConstraint('team_member_id', 'day'),
    )

    team_member_id = Column(ForeignKey('team_members.id', ondelete='CASCADE'), nullable=False)
    day = Column(Text, nullable=False)  # "monday" .. "sunday"
    is_available = Column(Integer, nullable=False, server_default=text('1'))
    start_time = Column(Text, nullable=False, server_default=text("'09:00'"))
    end_time = Column(Text, nullable=False, server_default=text("'17:00'"))
    id = Column(Integer, primary_key=True)
    break_start = Column(Text)
    break_end = Column(Text)

    team_member = relationship('TeamMembers', back_populates='availability')


class OpeningTimes(Base):
    """Singleton row with business-wide scheduling defaults."""
    __tablename__ = 'opening_times'

    timezone = Column(Text, nullable=False, server_default=text("'America/New_York'"))
    slot_cadence_min = Column(Integer, nullable=False, server_default=text('30'))
    max_advance_days = Column(Integer, nullable=False, server_default=text('30'))
    min_advance_hours = Column(Integer, nullable=False, server_default=text('1'))
    id = Column(Integer, primary_key=True)
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    schedule = relationship('OpeningTimesSchedule', back_populates='opening_times')


class OpeningTimesSchedule(Base):
    __tablename__ = 'opening_times_schedule'
    __table_args__ = (
        UniqueConstraint('opening_times_id', 'day'),
    )

    opening_times_id = Column(ForeignKey('opening_times.id', ondelete='CASCADE'), nullable=False)
    day = Column(Text, nullable=False)
    is_open = Column(Integer, nullable=False, server_default=text('1'))
    open_time = Column(Text, nullable=False, server_default=text("'09:00'"))
    close_time = Column(Text, nullable=False, server_default=text("'17:00'"))
    id = Column(Integer, primary_key=True)
    break_start = Column(Text)
    break_end = Column(Text)

    opening_times = relationship('OpeningTimes', back_populates='schedule')


class Appointments(Base):
    __tablename__ = 'appointments'

    kind = Column(Enum('appointment', 'blockout'), nullable=False, server_default=text("'appointment'"))
    date_start = Column(Text, nullable=False)  # local civil time, ISO
    status = Column(Text, nullable=False, server_default=text("'scheduled'"))
    id = Column(Integer, primary_key=True)
    service_id = Column(ForeignKey('services.id'))  # NULL for blockouts
    team_member_id = Column(ForeignKey('team_members.id', ondelete='SET NULL'))
    date_end = Column(Text)
    notes = Column(Text)
    blockout_reason = Column(Text)
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    service = relationship('Services', back_populates='appointments')
    team_member = relationship('TeamMembers', back_populates='appointments')
